# 📄 File: agroscan/modules/inspection_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the web endpoints for inspections
# 🧪 Purpose (Technical Summary):
# API package for inspection management, versioned under v1
# 🔗 Dependencies:
# agroscan.modules.inspection_management.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router
