# 📄 File: agroscan/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines the two kinds of AgroScan users: farmers, who manage their own inspections,
# and admins, who can see and manage everyone's.
# 🧪 Purpose (Technical Summary):
# User role enumeration; values match the role claim carried in access tokens.
# 🔗 Dependencies:
# enum
# 🔄 Connected Modules / Calls From:
# user_service.py, auth_service.py, infrastructure models, user DTOs

from enum import Enum


class UserRole(str, Enum):
    """User role enumeration"""
    FARMER = "Farmer"
    ADMIN = "Admin"
