# 📄 File: agroscan/modules/inspection_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the parts of inspection management the outside world talks to
# 🧪 Purpose (Technical Summary):
# Presentation layer package (FastAPI routers) for inspection management
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router
