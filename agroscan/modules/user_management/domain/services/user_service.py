# 📄 File: agroscan/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# Manages user accounts after sign-up: listing, viewing, creating, editing and removing
# them, while keeping emails unique and stopping people from editing other accounts.
# 🧪 Purpose (Technical Summary):
# Domain service for user CRUD. Email uniqueness is re-checked on create and on update
# only when the email changes. Reads and writes on a single account are limited to the
# account holder or an Admin, and only Admins may change a role.
# 🔗 Dependencies:
# UserRepository, PasswordHasher, DTOs, shared exceptions
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.users

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends

from ..repositories.user_repository import UserRepository
from agroscan.modules.user_management.application.dto.user_dto import (
    CreateUserDTO,
    UpdateUserDTO,
    UserDTO,
)
from agroscan.modules.user_management.infrastructure.database.models import UserModel
from agroscan.shared.core.exceptions import AuthorizationError, DuplicateResourceError
from agroscan.shared.core.security import PasswordHasher, get_password_hasher

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user account management.
    """

    def __init__(
        self,
        user_repository: UserRepository = Depends(),
        password_hasher: PasswordHasher = Depends(get_password_hasher),
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def get_all_users(self) -> List[UserDTO]:
        users = await self.user_repository.get_all()
        return [UserDTO.model_validate(u) for u in users]

    async def get_user_by_id(self, user_id: int, caller_id: int, is_admin: bool) -> Optional[UserDTO]:
        """Get one account; None if it does not exist."""
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            return None

        self._ensure_self_or_admin(user.id, caller_id, is_admin)
        return UserDTO.model_validate(user)

    async def create_user(self, data: CreateUserDTO) -> UserDTO:
        """
        Create an account with an explicit role.

        Raises:
            DuplicateResourceError: If the email is already registered
        """
        if await self.user_repository.email_exists(data.email):
            logger.warning(f"User creation rejected, email already exists: {data.email}")
            raise DuplicateResourceError("Email already exists", resource_type="user", field="email")

        now = datetime.now(timezone.utc)
        user = UserModel(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=self.password_hasher.hash(data.password),
            role=data.role,
            created_at=now,
            updated_at=now,
        )

        await self.user_repository.add(user)
        await self.user_repository.commit()

        logger.info(f"User created: {user.id} ({user.role.value})")
        return UserDTO.model_validate(user)

    async def update_user(
        self,
        user_id: int,
        data: UpdateUserDTO,
        caller_id: int,
        is_admin: bool,
    ) -> Optional[UserDTO]:
        """
        Update an account.

        Returns:
            Updated user, or None if it does not exist

        Raises:
            AuthorizationError: If the caller is not the account holder or an
                Admin, or a non-Admin tries to change a role
            DuplicateResourceError: If the new email is already registered
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            return None

        self._ensure_self_or_admin(user.id, caller_id, is_admin)

        if data.role is not None and data.role != user.role and not is_admin:
            logger.warning(f"User {caller_id} tried to change role of user {user.id}")
            raise AuthorizationError(
                "Only administrators can change roles",
                resource_type="user",
                resource_id=user.id,
                user_id=caller_id,
            )

        if user.email != data.email and await self.user_repository.email_exists(data.email):
            logger.warning(f"User update rejected, email already exists: {data.email}")
            raise DuplicateResourceError("Email already exists", resource_type="user", field="email")

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = data.email
        if data.role is not None:
            user.role = data.role
        user.updated_at = datetime.now(timezone.utc)

        await self.user_repository.update(user)
        await self.user_repository.commit()

        logger.info(f"User updated: {user.id}")
        return UserDTO.model_validate(user)

    async def delete_user(self, user_id: int, caller_id: int, is_admin: bool) -> bool:
        """
        Delete an account and, through the store cascade, its inspections.

        Returns:
            False if the account does not exist
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            return False

        self._ensure_self_or_admin(user.id, caller_id, is_admin)

        await self.user_repository.remove(user)
        await self.user_repository.commit()

        logger.info(f"User deleted: {user_id}")
        return True

    @staticmethod
    def _ensure_self_or_admin(owner_id: int, caller_id: int, is_admin: bool) -> None:
        if is_admin or owner_id == caller_id:
            return
        logger.warning(f"User {caller_id} denied access to user {owner_id}")
        raise AuthorizationError(
            "You can only access your own account",
            resource_type="user",
            resource_id=owner_id,
            user_id=caller_id,
        )
