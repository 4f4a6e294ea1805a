# 📄 File: agroscan/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update, and delete user accounts without
# saying which database does the work
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities extending the generic repository with email lookups
# 🔗 Dependencies:
# agroscan.shared.core.repository, typing, abc
# 🔄 Connected Modules / Calls From:
# auth_service.py, user_service.py, infrastructure implementation, agroscan.main (DI binding)

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from agroscan.shared.core.repository import GenericRepository

if TYPE_CHECKING:
    from agroscan.modules.user_management.infrastructure.database.models import UserModel


class UserRepository(GenericRepository["UserModel"]):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementation is in the infrastructure layer
    - The store's unique index on email is the authoritative duplicate guard;
      email_exists is a friendly pre-check only
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional["UserModel"]:
        """
        Get user by email address.

        Args:
            email: Email address to find

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """
        Check if an email address is already registered.

        Args:
            email: Email address to check

        Returns:
            True if a user with this email exists
        """
        pass
