# 📄 File: agroscan/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the web endpoints for user accounts
# 🧪 Purpose (Technical Summary):
# API package for user management, versioned under v1
# 🔗 Dependencies:
# agroscan.modules.user_management.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router
