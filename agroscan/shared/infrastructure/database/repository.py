# 📄 File: agroscan/shared/infrastructure/database/repository.py
#
# 🧭 Purpose (Layman Explanation):
# The common database worker that every record type (users, inspections, images,
# analyses) builds on, so they all save and look things up the same way.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of GenericRepository over one request-scoped
# AsyncSession. add/update/remove stage changes on the session; commit() counts
# the staged rows, commits, and translates constraint and driver failures into
# domain exceptions after rolling back.
#
# 🔗 Dependencies:
# - sqlalchemy async session, select, exceptions
# - agroscan.shared.core.repository (contract)
# - agroscan.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# - Entity repository implementations in each module's infrastructure/database

import logging
from typing import Any, Generic, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agroscan.shared.core.exceptions import ConflictError, DatabaseError, DuplicateResourceError
from agroscan.shared.core.repository import GenericRepository, ModelT

logger = logging.getLogger(__name__)


class SQLAlchemyRepository(GenericRepository[ModelT], Generic[ModelT]):
    """
    Generic SQLAlchemy repository.

    Subclasses pass their ORM model class and add entity-specific queries.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession, model: Type[ModelT]):
        self._session = session
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        try:
            return await self._session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving {self.table_name} {entity_id}: {e}")
            raise DatabaseError(operation="get_by_id", table=self.table_name) from e

    async def get_all(self) -> List[ModelT]:
        return await self._scalars(select(self.model), "get_all")

    async def find(self, *criteria: Any) -> List[ModelT]:
        return await self._scalars(select(self.model).where(*criteria), "find")

    async def first_or_default(self, *criteria: Any) -> Optional[ModelT]:
        try:
            stmt = select(self.model).where(*criteria).limit(1)
            result = await self._session.execute(stmt)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error querying {self.table_name}: {e}")
            raise DatabaseError(operation="first_or_default", table=self.table_name) from e

    async def add(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        # Attached entities are already tracked; this re-attaches detached ones
        self._session.add(entity)
        return entity

    async def remove(self, entity: ModelT) -> None:
        await self._session.delete(entity)

    async def commit(self) -> int:
        affected = len(self._session.new) + len(self._session.dirty) + len(self._session.deleted)

        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            message = str(e.orig).lower()
            if "email" in message and "unique" in message:
                logger.warning(f"Unique email constraint violated on {self.table_name}")
                raise DuplicateResourceError(
                    "Email already exists",
                    resource_type="user",
                    field="email",
                ) from e
            logger.warning(f"Integrity error on {self.table_name}: {e.orig}")
            raise ConflictError("The change conflicts with existing data") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error committing {self.table_name}: {e}", exc_info=True)
            raise DatabaseError(operation="commit", table=self.table_name) from e

        logger.debug(f"Committed {affected} change(s) to {self.table_name}")
        return affected

    async def _scalars(self, stmt, operation: str) -> List[ModelT]:
        try:
            result = await self._session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Database error during {operation} on {self.table_name}: {e}")
            raise DatabaseError(operation=operation, table=self.table_name) from e
