# 📄 File: agroscan/modules/inspection_management/presentation/api/v1/inspection_analyses.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for the analysis results of an inspection:
# recording a result, correcting it, listing them, fetching the newest, and removing one.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for InspectionAnalysis. Results are stored as sent; every operation
# is owner-or-Admin on the parent inspection. Absent analyses or parents become 404.
#
# 🔗 Dependencies:
# - FastAPI router, status codes, Response
# - agroscan.modules.inspection_management.domain.services.inspection_analysis_service
# - agroscan.shared.core.dependencies (get_current_user)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.api.v1.router (router inclusion under /inspection-analyses)

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from agroscan.modules.inspection_management.application.dto.inspection_analysis_dto import (
    CreateInspectionAnalysisDTO,
    InspectionAnalysisDTO,
    UpdateInspectionAnalysisDTO,
)
from agroscan.modules.inspection_management.domain.services.inspection_analysis_service import (
    InspectionAnalysisService,
)
from agroscan.shared.core.dependencies import CurrentUser, get_current_user
from agroscan.shared.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

inspection_analyses_router = APIRouter()


def _analysis_not_found(analysis_id: int) -> NotFoundError:
    return NotFoundError("Analysis not found", resource_type="inspection_analysis", resource_id=analysis_id)


@inspection_analyses_router.get(
    "/inspection/{inspection_id}",
    response_model=List[InspectionAnalysisDTO],
    summary="List analyses of an inspection",
    description="Analyses of one inspection, newest first",
    responses={404: {"description": "Inspection not found"}},
)
async def list_inspection_analyses(
    inspection_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    analysis_service: InspectionAnalysisService = Depends(),
) -> List[InspectionAnalysisDTO]:
    analyses = await analysis_service.get_analyses_by_inspection_id(
        inspection_id,
        current_user.user_id,
        current_user.is_admin,
    )
    if analyses is None:
        raise NotFoundError("Inspection not found", resource_type="inspection", resource_id=inspection_id)
    return analyses


@inspection_analyses_router.get(
    "/inspection/{inspection_id}/latest",
    response_model=InspectionAnalysisDTO,
    summary="Latest analysis of an inspection",
    responses={404: {"description": "Inspection not found or not analysed yet"}},
)
async def get_latest_inspection_analysis(
    inspection_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    analysis_service: InspectionAnalysisService = Depends(),
) -> InspectionAnalysisDTO:
    analysis = await analysis_service.get_latest_analysis_by_inspection_id(
        inspection_id,
        current_user.user_id,
        current_user.is_admin,
    )
    if analysis is None:
        raise NotFoundError(
            "No analysis found for this inspection",
            resource_type="inspection",
            resource_id=inspection_id,
        )
    return analysis


@inspection_analyses_router.get(
    "/{analysis_id}",
    response_model=InspectionAnalysisDTO,
    summary="Get analysis",
    responses={404: {"description": "Analysis not found"}},
)
async def get_inspection_analysis(
    analysis_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    analysis_service: InspectionAnalysisService = Depends(),
) -> InspectionAnalysisDTO:
    analysis = await analysis_service.get_analysis_by_id(
        analysis_id,
        current_user.user_id,
        current_user.is_admin,
    )
    if analysis is None:
        raise _analysis_not_found(analysis_id)
    return analysis


@inspection_analyses_router.post(
    "",
    response_model=InspectionAnalysisDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Record analysis",
    responses={
        403: {"description": "Not the owner of this inspection"},
        409: {"description": "Inspection not found"},
    }
)
async def create_inspection_analysis(
    analysis_data: CreateInspectionAnalysisDTO,
    current_user: CurrentUser = Depends(get_current_user),
    analysis_service: InspectionAnalysisService = Depends(),
) -> InspectionAnalysisDTO:
    return await analysis_service.create_analysis(analysis_data, current_user.user_id, current_user.is_admin)


@inspection_analyses_router.put(
    "/{analysis_id}",
    response_model=InspectionAnalysisDTO,
    summary="Update analysis",
    responses={
        403: {"description": "Not the owner of this inspection"},
        404: {"description": "Analysis not found"},
    }
)
async def update_inspection_analysis(
    analysis_id: int,
    analysis_data: UpdateInspectionAnalysisDTO,
    current_user: CurrentUser = Depends(get_current_user),
    analysis_service: InspectionAnalysisService = Depends(),
) -> InspectionAnalysisDTO:
    analysis = await analysis_service.update_analysis(
        analysis_id,
        analysis_data,
        current_user.user_id,
        current_user.is_admin,
    )
    if analysis is None:
        raise _analysis_not_found(analysis_id)
    return analysis


@inspection_analyses_router.delete(
    "/{analysis_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete analysis",
    responses={
        204: {"description": "Analysis deleted"},
        403: {"description": "Not the owner of this inspection"},
        404: {"description": "Analysis not found"},
    }
)
async def delete_inspection_analysis(
    analysis_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    analysis_service: InspectionAnalysisService = Depends(),
) -> Response:
    deleted = await analysis_service.delete_analysis(analysis_id, current_user.user_id, current_user.is_admin)
    if not deleted:
        raise _analysis_not_found(analysis_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
