# 📄 File: agroscan/modules/inspection_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The storage side of inspections
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for inspection persistence
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# agroscan.main (dependency overrides)
