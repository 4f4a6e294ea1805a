# 📄 File: agroscan/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the basic user definitions in one place
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the UserRole enum
# 🔗 Dependencies:
# user.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure models

from .user import UserRole

__all__ = ["UserRole"]
