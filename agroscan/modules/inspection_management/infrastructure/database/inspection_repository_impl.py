# 📄 File: agroscan/modules/inspection_management/infrastructure/database/inspection_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file does the database work for inspections: listing a farmer's inspections
# newest first and loading one inspection together with its photos and results.
#
# 🧪 Purpose (Technical Summary):
# Concrete InspectionRepository on the generic SQLAlchemy repository. Related rows are
# loaded with selectinload and populate_existing so objects already in the session are
# refreshed with children staged earlier in the same request.
#
# 🔗 Dependencies:
# - InspectionRepository interface, InspectionModel
# - agroscan.shared.infrastructure.database (generic repository, session)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.main (dependency override for InspectionRepository)
# - inspection services (through the interface)

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from agroscan.modules.inspection_management.domain.repositories.inspection_repository import (
    InspectionRepository,
)
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionModel
from agroscan.shared.core.exceptions import DatabaseError
from agroscan.shared.infrastructure.database.repository import SQLAlchemyRepository
from agroscan.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


class InspectionRepositoryImpl(SQLAlchemyRepository[InspectionModel], InspectionRepository):
    """
    SQLAlchemy implementation of the InspectionRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        super().__init__(session, InspectionModel)

    async def get_all(self) -> List[InspectionModel]:
        """All inspections, newest first."""
        stmt = (
            select(InspectionModel)
            .options(selectinload(InspectionModel.images), selectinload(InspectionModel.analyses))
            .order_by(InspectionModel.created_at.desc(), InspectionModel.id.desc())
            .execution_options(populate_existing=True)
        )
        return await self._scalars(stmt, "get_all")

    async def get_by_user_id(self, user_id: int) -> List[InspectionModel]:
        stmt = (
            select(InspectionModel)
            .where(InspectionModel.user_id == user_id)
            .options(selectinload(InspectionModel.images), selectinload(InspectionModel.analyses))
            .order_by(InspectionModel.created_at.desc(), InspectionModel.id.desc())
            .execution_options(populate_existing=True)
        )
        inspections = await self._scalars(stmt, "get_by_user_id")
        logger.debug(f"Retrieved {len(inspections)} inspections for user {user_id}")
        return inspections

    async def get_with_related_data(self, inspection_id: int) -> Optional[InspectionModel]:
        try:
            stmt = (
                select(InspectionModel)
                .where(InspectionModel.id == inspection_id)
                .options(
                    selectinload(InspectionModel.user),
                    selectinload(InspectionModel.images),
                    selectinload(InspectionModel.analyses),
                )
                .execution_options(populate_existing=True)
            )
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving inspection {inspection_id}: {e}")
            raise DatabaseError(operation="get_with_related_data", table="inspections") from e
