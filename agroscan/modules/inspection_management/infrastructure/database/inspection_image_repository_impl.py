# 📄 File: agroscan/modules/inspection_management/infrastructure/database/inspection_image_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file does the database work for inspection photos, listing them in the order
# they were added.
#
# 🧪 Purpose (Technical Summary):
# Concrete InspectionImageRepository on the generic SQLAlchemy repository.
#
# 🔗 Dependencies:
# - InspectionImageRepository interface, InspectionImageModel
# - agroscan.shared.infrastructure.database (generic repository, session)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.main (dependency override for InspectionImageRepository)
# - inspection_image_service.py (through the interface)

from typing import List

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agroscan.modules.inspection_management.domain.repositories.inspection_image_repository import (
    InspectionImageRepository,
)
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionImageModel
from agroscan.shared.infrastructure.database.repository import SQLAlchemyRepository
from agroscan.shared.infrastructure.database.session import get_db_session


class InspectionImageRepositoryImpl(SQLAlchemyRepository[InspectionImageModel], InspectionImageRepository):
    """SQLAlchemy implementation of the InspectionImageRepository interface."""

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        super().__init__(session, InspectionImageModel)

    async def get_by_inspection_id(self, inspection_id: int) -> List[InspectionImageModel]:
        stmt = (
            select(InspectionImageModel)
            .where(InspectionImageModel.inspection_id == inspection_id)
            .order_by(InspectionImageModel.created_at.asc(), InspectionImageModel.id.asc())
        )
        return await self._scalars(stmt, "get_by_inspection_id")
