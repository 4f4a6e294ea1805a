# 📄 File: agroscan/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles the database work for user accounts, like finding a user by their
# email or checking whether an email is already taken.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository on top of the generic SQLAlchemy
# repository, bound to the request-scoped session through FastAPI Depends.
#
# 🔗 Dependencies:
# - agroscan.modules.user_management.domain.repositories.user_repository (interface)
# - agroscan.modules.user_management.infrastructure.database.models (UserModel)
# - agroscan.shared.infrastructure.database (generic repository, session)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.main (dependency override for UserRepository)
# - auth_service.py and user_service.py (through the interface)

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agroscan.modules.user_management.domain.repositories.user_repository import UserRepository
from agroscan.modules.user_management.infrastructure.database.models import UserModel
from agroscan.shared.core.exceptions import DatabaseError
from agroscan.shared.infrastructure.database.repository import SQLAlchemyRepository
from agroscan.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


class UserRepositoryImpl(SQLAlchemyRepository[UserModel], UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        super().__init__(session, UserModel)

    async def get_by_email(self, email: str) -> Optional[UserModel]:
        """
        Retrieve a user by their email address.

        Args:
            email: Email address to search for

        Returns:
            Optional[UserModel]: User if found, None otherwise
        """
        try:
            stmt = select(UserModel).where(UserModel.email == email)
            result = await self._session.execute(stmt)
            user = result.scalar_one_or_none()

            if user is None:
                logger.debug(f"User not found by email: {email}")
            return user

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by email {email}: {e}")
            raise DatabaseError(operation="get_by_email", table="users") from e

    async def email_exists(self, email: str) -> bool:
        try:
            stmt = select(exists().where(UserModel.email == email))
            result = await self._session.execute(stmt)
            return bool(result.scalar())

        except SQLAlchemyError as e:
            logger.error(f"Database error checking email {email}: {e}")
            raise DatabaseError(operation="email_exists", table="users") from e
