# 📄 File: agroscan/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the feature areas of AgroScan: accounts and inspections
# 🧪 Purpose (Technical Summary):
# Namespace for the modular monolith's feature modules
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router, agroscan.main
