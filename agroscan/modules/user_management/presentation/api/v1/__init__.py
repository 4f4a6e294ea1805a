# 📄 File: agroscan/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups version 1 of the sign-up, login and account endpoints
# 🧪 Purpose (Technical Summary):
# API version 1 package for user management routers
# 🔗 Dependencies:
# auth, users
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router

from .auth import auth_router
from .users import users_router

__all__ = ["auth_router", "users_router"]
