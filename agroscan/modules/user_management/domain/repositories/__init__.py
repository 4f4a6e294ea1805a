# 📄 File: agroscan/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access contract for user accounts
# 🧪 Purpose (Technical Summary):
# Package initialization for the user repository interface
# 🔗 Dependencies:
# user_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .user_repository import UserRepository

__all__ = ["UserRepository"]
