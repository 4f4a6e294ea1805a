# 📄 File: agroscan/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business rules for signing up, logging in and managing accounts
# 🧪 Purpose (Technical Summary):
# Package initialization for user domain services
# 🔗 Dependencies:
# Service modules
# 🔄 Connected Modules / Calls From:
# Auth and users routers

from .auth_service import AuthService
from .user_service import UserService

__all__ = ["AuthService", "UserService"]
