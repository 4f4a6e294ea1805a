# 📄 File: agroscan/modules/inspection_management/domain/services/inspection_service.py
# 🧭 Purpose (Layman Explanation):
# Manages inspection records: farmers see and change only their own inspections while
# admins can see and change all of them.
# 🧪 Purpose (Technical Summary):
# Domain service for inspection CRUD. Lists are owner-scoped unless the caller is an
# Admin; single reads, updates and deletes check existence first (None/False) and
# ownership second (AuthorizationError). Creation always assigns the caller as owner.
# 🔗 Dependencies:
# InspectionRepository, inspection DTOs, access.ensure_inspection_access
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.inspections

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends

from ..repositories.inspection_repository import InspectionRepository
from .access import ensure_inspection_access
from agroscan.modules.inspection_management.application.dto.inspection_dto import (
    CreateInspectionDTO,
    InspectionDTO,
    UpdateInspectionDTO,
)
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionModel

logger = logging.getLogger(__name__)


class InspectionService:
    """
    Domain service for inspection records.
    """

    def __init__(self, inspection_repository: InspectionRepository = Depends()):
        self.inspection_repository = inspection_repository

    async def get_user_inspections(self, user_id: int) -> List[InspectionDTO]:
        """Inspections owned by one user, newest first."""
        inspections = await self.inspection_repository.get_by_user_id(user_id)
        return [InspectionDTO.from_model(i) for i in inspections]

    async def get_all_inspections(self) -> List[InspectionDTO]:
        inspections = await self.inspection_repository.get_all()
        return [InspectionDTO.from_model(i) for i in inspections]

    async def list_inspections(self, user_id: int, is_admin: bool) -> List[InspectionDTO]:
        """
        Inspections visible to the caller.

        Admins get every inspection; everybody else gets their own.
        """
        if is_admin:
            return await self.get_all_inspections()
        return await self.get_user_inspections(user_id)

    async def get_inspection_by_id(
        self,
        inspection_id: int,
        user_id: int,
        is_admin: bool,
    ) -> Optional[InspectionDTO]:
        """
        Get one inspection with its related data.

        Returns:
            The inspection, or None if it does not exist

        Raises:
            AuthorizationError: If the caller is neither owner nor Admin
        """
        inspection = await self.inspection_repository.get_with_related_data(inspection_id)
        if inspection is None:
            return None

        ensure_inspection_access(inspection, user_id, is_admin, "view")
        return InspectionDTO.from_model(inspection)

    async def create_inspection(self, data: CreateInspectionDTO, user_id: int) -> InspectionDTO:
        """Create an inspection owned by the caller."""
        now = datetime.now(timezone.utc)
        inspection = InspectionModel(
            **data.model_dump(),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            images=[],
            analyses=[],
        )

        await self.inspection_repository.add(inspection)
        await self.inspection_repository.commit()

        logger.info(f"Inspection {inspection.id} created by user {user_id}")
        return InspectionDTO.from_model(inspection)

    async def update_inspection(
        self,
        inspection_id: int,
        data: UpdateInspectionDTO,
        user_id: int,
        is_admin: bool,
    ) -> Optional[InspectionDTO]:
        """
        Replace an inspection's editable fields.

        Returns:
            Updated inspection, or None if it does not exist

        Raises:
            AuthorizationError: If the caller is neither owner nor Admin
        """
        inspection = await self.inspection_repository.get_by_id(inspection_id)
        if inspection is None:
            return None

        ensure_inspection_access(inspection, user_id, is_admin, "update")

        for field, value in data.model_dump().items():
            setattr(inspection, field, value)
        inspection.updated_at = datetime.now(timezone.utc)

        await self.inspection_repository.update(inspection)
        await self.inspection_repository.commit()

        logger.info(f"Inspection {inspection_id} updated by user {user_id}")
        return InspectionDTO.from_model(inspection)

    async def delete_inspection(self, inspection_id: int, user_id: int, is_admin: bool) -> bool:
        """
        Delete an inspection; its images and analyses go with it.

        Returns:
            False if the inspection does not exist

        Raises:
            AuthorizationError: If the caller is neither owner nor Admin
        """
        inspection = await self.inspection_repository.get_by_id(inspection_id)
        if inspection is None:
            return False

        ensure_inspection_access(inspection, user_id, is_admin, "delete")

        await self.inspection_repository.remove(inspection)
        await self.inspection_repository.commit()

        logger.info(f"Inspection {inspection_id} deleted by user {user_id}")
        return True
