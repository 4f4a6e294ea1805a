# 📄 File: agroscan/modules/inspection_management/infrastructure/database/inspection_analysis_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file does the database work for analysis results, listing them newest first and
# picking out the latest one for an inspection.
#
# 🧪 Purpose (Technical Summary):
# Concrete InspectionAnalysisRepository on the generic SQLAlchemy repository. Ties on
# created_at are broken by primary key so "latest" is deterministic.
#
# 🔗 Dependencies:
# - InspectionAnalysisRepository interface, InspectionAnalysisModel
# - agroscan.shared.infrastructure.database (generic repository, session)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.main (dependency override for InspectionAnalysisRepository)
# - inspection_analysis_service.py (through the interface)

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agroscan.modules.inspection_management.domain.repositories.inspection_analysis_repository import (
    InspectionAnalysisRepository,
)
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionAnalysisModel
from agroscan.shared.core.exceptions import DatabaseError
from agroscan.shared.infrastructure.database.repository import SQLAlchemyRepository
from agroscan.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)


class InspectionAnalysisRepositoryImpl(
    SQLAlchemyRepository[InspectionAnalysisModel],
    InspectionAnalysisRepository,
):
    """SQLAlchemy implementation of the InspectionAnalysisRepository interface."""

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        super().__init__(session, InspectionAnalysisModel)

    def _newest_first(self, inspection_id: int):
        return (
            select(InspectionAnalysisModel)
            .where(InspectionAnalysisModel.inspection_id == inspection_id)
            .order_by(InspectionAnalysisModel.created_at.desc(), InspectionAnalysisModel.id.desc())
        )

    async def get_by_inspection_id(self, inspection_id: int) -> List[InspectionAnalysisModel]:
        return await self._scalars(self._newest_first(inspection_id), "get_by_inspection_id")

    async def get_latest_by_inspection_id(self, inspection_id: int) -> Optional[InspectionAnalysisModel]:
        try:
            result = await self._session.execute(self._newest_first(inspection_id).limit(1))
            return result.scalars().first()

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving latest analysis for inspection {inspection_id}: {e}")
            raise DatabaseError(operation="get_latest_by_inspection_id", table="inspection_analyses") from e
