# 📄 File: agroscan/modules/inspection_management/domain/services/inspection_analysis_service.py
# 🧭 Purpose (Layman Explanation):
# Manages the analysis results attached to an inspection: recording, editing, listing and
# removing them, and finding the most recent one, for the owner or an admin only.
# 🧪 Purpose (Technical Summary):
# Domain service for inspection analyses. Results are stored as given, never computed.
# Creation requires an existing parent (InvalidReferenceError otherwise); all other
# operations report a missing analysis or parent as not found before checking ownership.
# 🔗 Dependencies:
# InspectionAnalysisRepository, InspectionRepository, analysis DTOs
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.inspection_analyses

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends

from ..repositories.inspection_analysis_repository import InspectionAnalysisRepository
from ..repositories.inspection_repository import InspectionRepository
from .access import ensure_inspection_access
from agroscan.modules.inspection_management.application.dto.inspection_analysis_dto import (
    CreateInspectionAnalysisDTO,
    InspectionAnalysisDTO,
    UpdateInspectionAnalysisDTO,
)
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionAnalysisModel
from agroscan.shared.core.exceptions import InvalidReferenceError

logger = logging.getLogger(__name__)


class InspectionAnalysisService:
    """
    Domain service for analysis results attached to inspections.
    """

    def __init__(
        self,
        analysis_repository: InspectionAnalysisRepository = Depends(),
        inspection_repository: InspectionRepository = Depends(),
    ):
        self.analysis_repository = analysis_repository
        self.inspection_repository = inspection_repository

    async def get_analyses_by_inspection_id(
        self,
        inspection_id: int,
        user_id: int,
        is_admin: bool,
    ) -> Optional[List[InspectionAnalysisDTO]]:
        """
        Analyses of one inspection, newest first.

        Returns:
            None if the inspection does not exist
        """
        if not await self._can_read_parent(inspection_id, user_id, is_admin):
            return None

        analyses = await self.analysis_repository.get_by_inspection_id(inspection_id)
        return [InspectionAnalysisDTO.model_validate(a) for a in analyses]

    async def get_latest_analysis_by_inspection_id(
        self,
        inspection_id: int,
        user_id: int,
        is_admin: bool,
    ) -> Optional[InspectionAnalysisDTO]:
        """
        Most recently created analysis of an inspection.

        Returns:
            None if the inspection does not exist or has no analyses
        """
        if not await self._can_read_parent(inspection_id, user_id, is_admin):
            return None

        latest = await self.analysis_repository.get_latest_by_inspection_id(inspection_id)
        return InspectionAnalysisDTO.model_validate(latest) if latest else None

    async def get_analysis_by_id(
        self,
        analysis_id: int,
        user_id: int,
        is_admin: bool,
    ) -> Optional[InspectionAnalysisDTO]:
        analysis = await self.analysis_repository.get_by_id(analysis_id)
        if analysis is None:
            return None

        if not await self._can_read_parent(analysis.inspection_id, user_id, is_admin):
            return None
        return InspectionAnalysisDTO.model_validate(analysis)

    async def create_analysis(
        self,
        data: CreateInspectionAnalysisDTO,
        user_id: int,
        is_admin: bool,
    ) -> InspectionAnalysisDTO:
        """
        Record an analysis for an inspection.

        Raises:
            InvalidReferenceError: If the inspection does not exist
            AuthorizationError: If the caller is neither owner nor Admin
        """
        inspection = await self.inspection_repository.get_by_id(data.inspection_id)
        if inspection is None:
            logger.warning(f"Analysis rejected, inspection {data.inspection_id} not found")
            raise InvalidReferenceError(
                "Inspection not found",
                resource_type="inspection",
                resource_id=data.inspection_id,
            )

        ensure_inspection_access(inspection, user_id, is_admin, "add analyses to")

        now = datetime.now(timezone.utc)
        analysis = InspectionAnalysisModel(
            **data.model_dump(),
            created_at=now,
            updated_at=now,
        )

        await self.analysis_repository.add(analysis)
        await self.analysis_repository.commit()

        logger.info(f"Analysis {analysis.id} recorded for inspection {data.inspection_id} by user {user_id}")
        return InspectionAnalysisDTO.model_validate(analysis)

    async def update_analysis(
        self,
        analysis_id: int,
        data: UpdateInspectionAnalysisDTO,
        user_id: int,
        is_admin: bool,
    ) -> Optional[InspectionAnalysisDTO]:
        """
        Replace an analysis' editable fields.

        Returns:
            Updated analysis, or None if it or its inspection does not exist
        """
        analysis = await self.analysis_repository.get_by_id(analysis_id)
        if analysis is None:
            return None

        inspection = await self.inspection_repository.get_by_id(analysis.inspection_id)
        if inspection is None:
            return None

        ensure_inspection_access(inspection, user_id, is_admin, "update analyses of")

        for field, value in data.model_dump().items():
            setattr(analysis, field, value)
        analysis.updated_at = datetime.now(timezone.utc)

        await self.analysis_repository.update(analysis)
        await self.analysis_repository.commit()

        logger.info(f"Analysis {analysis_id} updated by user {user_id}")
        return InspectionAnalysisDTO.model_validate(analysis)

    async def delete_analysis(self, analysis_id: int, user_id: int, is_admin: bool) -> bool:
        """
        Remove an analysis.

        Returns:
            False if the analysis or its inspection does not exist
        """
        analysis = await self.analysis_repository.get_by_id(analysis_id)
        if analysis is None:
            return False

        inspection = await self.inspection_repository.get_by_id(analysis.inspection_id)
        if inspection is None:
            return False

        ensure_inspection_access(inspection, user_id, is_admin, "delete analyses of")

        await self.analysis_repository.remove(analysis)
        await self.analysis_repository.commit()

        logger.info(f"Analysis {analysis_id} deleted by user {user_id}")
        return True

    async def _can_read_parent(self, inspection_id: int, user_id: int, is_admin: bool) -> bool:
        """False if the inspection is missing; raises if the caller may not read it."""
        inspection = await self.inspection_repository.get_by_id(inspection_id)
        if inspection is None:
            return False

        ensure_inspection_access(inspection, user_id, is_admin, "view analyses of")
        return True
