# 📄 File: agroscan/modules/inspection_management/presentation/api/v1/inspection_images.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for inspection photos: attaching a photo link,
# uploading a photo file, listing an inspection's photos and removing one.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for InspectionImage. JSON creation stores a given path; multipart
# upload hands the bytes to the local file storage and stores the returned URL path.
# Every operation is owner-or-Admin on the parent inspection.
#
# 🔗 Dependencies:
# - FastAPI router, UploadFile, Form, File
# - python-multipart (form parsing)
# - agroscan.modules.inspection_management.domain.services.inspection_image_service
# - agroscan.shared.core.dependencies (get_current_user)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.api.v1.router (router inclusion under /inspection-images)

import logging
from typing import List

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from agroscan.modules.inspection_management.application.dto.inspection_image_dto import (
    CreateInspectionImageDTO,
    InspectionImageDTO,
)
from agroscan.modules.inspection_management.domain.services.inspection_image_service import (
    InspectionImageService,
)
from agroscan.shared.core.dependencies import CurrentUser, get_current_user
from agroscan.shared.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

inspection_images_router = APIRouter()


@inspection_images_router.get(
    "/inspection/{inspection_id}",
    response_model=List[InspectionImageDTO],
    summary="List images of an inspection",
    responses={404: {"description": "Inspection not found"}},
)
async def list_inspection_images(
    inspection_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    image_service: InspectionImageService = Depends(),
) -> List[InspectionImageDTO]:
    images = await image_service.get_images_by_inspection_id(
        inspection_id,
        current_user.user_id,
        current_user.is_admin,
    )
    if images is None:
        raise NotFoundError("Inspection not found", resource_type="inspection", resource_id=inspection_id)
    return images


@inspection_images_router.get(
    "/{image_id}",
    response_model=InspectionImageDTO,
    summary="Get inspection image",
    responses={404: {"description": "Image not found"}},
)
async def get_inspection_image(
    image_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    image_service: InspectionImageService = Depends(),
) -> InspectionImageDTO:
    image = await image_service.get_image_by_id(image_id, current_user.user_id, current_user.is_admin)
    if image is None:
        raise NotFoundError("Image not found", resource_type="inspection_image", resource_id=image_id)
    return image


@inspection_images_router.post(
    "",
    response_model=InspectionImageDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Attach image path",
    description="Attach an already stored image path or URL to an inspection",
    responses={
        403: {"description": "Not the owner of this inspection"},
        409: {"description": "Inspection not found"},
    }
)
async def create_inspection_image(
    image_data: CreateInspectionImageDTO,
    current_user: CurrentUser = Depends(get_current_user),
    image_service: InspectionImageService = Depends(),
) -> InspectionImageDTO:
    return await image_service.create_image(image_data, current_user.user_id, current_user.is_admin)


@inspection_images_router.post(
    "/upload",
    response_model=InspectionImageDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Upload image",
    description="Upload an image file and attach it to an inspection",
    responses={
        403: {"description": "Not the owner of this inspection"},
        409: {"description": "Inspection not found"},
        422: {"description": "Not an acceptable image"},
    }
)
async def upload_inspection_image(
    inspection_id: int = Form(..., gt=0),
    file: UploadFile = File(...),
    current_user: CurrentUser = Depends(get_current_user),
    image_service: InspectionImageService = Depends(),
) -> InspectionImageDTO:
    content = await file.read()
    return await image_service.upload_image(
        inspection_id,
        content,
        file.filename or "",
        current_user.user_id,
        current_user.is_admin,
    )


@inspection_images_router.delete(
    "/{image_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete inspection image",
    responses={
        204: {"description": "Image deleted"},
        403: {"description": "Not the owner of this inspection"},
        404: {"description": "Image not found"},
    }
)
async def delete_inspection_image(
    image_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    image_service: InspectionImageService = Depends(),
) -> Response:
    deleted = await image_service.delete_image(image_id, current_user.user_id, current_user.is_admin)
    if not deleted:
        raise NotFoundError("Image not found", resource_type="inspection_image", resource_id=image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
