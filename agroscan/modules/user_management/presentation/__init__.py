# 📄 File: agroscan/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the parts of user management that the outside world talks to
# 🧪 Purpose (Technical Summary):
# Presentation layer package (FastAPI routers) for user management
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router
