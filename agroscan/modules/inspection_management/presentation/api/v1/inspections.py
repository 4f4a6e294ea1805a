# 📄 File: agroscan/modules/inspection_management/presentation/api/v1/inspections.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for plant inspections: farmers record and manage
# their own inspections, admins can see and manage everyone's.
#
# 🧪 Purpose (Technical Summary):
# FastAPI inspection CRUD endpoints. The caller identity comes from the bearer token;
# listing is scoped to the caller unless they are an Admin, and single reads, updates
# and deletes are owner-or-Admin. Missing inspections become 404 here.
#
# 🔗 Dependencies:
# - FastAPI router, status codes, Response
# - agroscan.modules.inspection_management.domain.services.inspection_service
# - agroscan.shared.core.dependencies (get_current_user)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.api.v1.router (router inclusion under /inspections)

"""
Inspections API Endpoints

Endpoints:
- GET /: List the caller's inspections (all of them for admins), newest first
- GET /{inspection_id}: Get one inspection with its image paths
- POST /: Create an inspection owned by the caller
- PUT /{inspection_id}: Update an inspection (owner or admin)
- DELETE /{inspection_id}: Delete an inspection with its images and analyses
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from agroscan.modules.inspection_management.application.dto.inspection_dto import (
    CreateInspectionDTO,
    InspectionDTO,
    UpdateInspectionDTO,
)
from agroscan.modules.inspection_management.domain.services.inspection_service import InspectionService
from agroscan.shared.core.dependencies import CurrentUser, get_current_user
from agroscan.shared.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

inspections_router = APIRouter()


def _not_found(inspection_id: int) -> NotFoundError:
    return NotFoundError("Inspection not found", resource_type="inspection", resource_id=inspection_id)


@inspections_router.get(
    "",
    response_model=List[InspectionDTO],
    summary="List inspections",
    description="Caller's own inspections, or every inspection for administrators",
)
async def list_inspections(
    current_user: CurrentUser = Depends(get_current_user),
    inspection_service: InspectionService = Depends(),
) -> List[InspectionDTO]:
    return await inspection_service.list_inspections(current_user.user_id, current_user.is_admin)


@inspections_router.get(
    "/{inspection_id}",
    response_model=InspectionDTO,
    summary="Get inspection",
    responses={
        403: {"description": "Not the owner of this inspection"},
        404: {"description": "Inspection not found"},
    }
)
async def get_inspection(
    inspection_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    inspection_service: InspectionService = Depends(),
) -> InspectionDTO:
    inspection = await inspection_service.get_inspection_by_id(
        inspection_id,
        current_user.user_id,
        current_user.is_admin,
    )
    if inspection is None:
        raise _not_found(inspection_id)
    return inspection


@inspections_router.post(
    "",
    response_model=InspectionDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create inspection",
    description="Record a new inspection owned by the caller",
)
async def create_inspection(
    inspection_data: CreateInspectionDTO,
    current_user: CurrentUser = Depends(get_current_user),
    inspection_service: InspectionService = Depends(),
) -> InspectionDTO:
    return await inspection_service.create_inspection(inspection_data, current_user.user_id)


@inspections_router.put(
    "/{inspection_id}",
    response_model=InspectionDTO,
    summary="Update inspection",
    responses={
        403: {"description": "Not the owner of this inspection"},
        404: {"description": "Inspection not found"},
    }
)
async def update_inspection(
    inspection_id: int,
    inspection_data: UpdateInspectionDTO,
    current_user: CurrentUser = Depends(get_current_user),
    inspection_service: InspectionService = Depends(),
) -> InspectionDTO:
    inspection = await inspection_service.update_inspection(
        inspection_id,
        inspection_data,
        current_user.user_id,
        current_user.is_admin,
    )
    if inspection is None:
        raise _not_found(inspection_id)
    return inspection


@inspections_router.delete(
    "/{inspection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete inspection",
    responses={
        204: {"description": "Inspection deleted"},
        403: {"description": "Not the owner of this inspection"},
        404: {"description": "Inspection not found"},
    }
)
async def delete_inspection(
    inspection_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    inspection_service: InspectionService = Depends(),
) -> Response:
    deleted = await inspection_service.delete_inspection(
        inspection_id,
        current_user.user_id,
        current_user.is_admin,
    )
    if not deleted:
        raise _not_found(inspection_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
