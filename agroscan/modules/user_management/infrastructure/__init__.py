# 📄 File: agroscan/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The storage side of user accounts
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for user persistence
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# agroscan.main (dependency overrides)
