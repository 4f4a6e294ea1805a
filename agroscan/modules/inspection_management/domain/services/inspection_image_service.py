# 📄 File: agroscan/modules/inspection_management/domain/services/inspection_image_service.py
# 🧭 Purpose (Layman Explanation):
# Manages the photos attached to an inspection: adding a photo link or an uploaded file,
# listing them, and removing them, but only for the inspection's owner or an admin.
# 🧪 Purpose (Technical Summary):
# Domain service for inspection images. Creation requires an existing parent inspection
# (InvalidReferenceError otherwise) and owner-or-Admin access; reads and deletes report
# a missing image or parent as not found before checking ownership.
# 🔗 Dependencies:
# InspectionImageRepository, InspectionRepository, LocalFileStorage, image DTOs
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.inspection_images

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends

from ..repositories.inspection_image_repository import InspectionImageRepository
from ..repositories.inspection_repository import InspectionRepository
from .access import ensure_inspection_access
from agroscan.modules.inspection_management.application.dto.inspection_image_dto import (
    CreateInspectionImageDTO,
    InspectionImageDTO,
)
from agroscan.modules.inspection_management.infrastructure.database.models import InspectionImageModel
from agroscan.shared.core.exceptions import InvalidReferenceError
from agroscan.shared.infrastructure.storage.file_manager import LocalFileStorage, get_file_storage

logger = logging.getLogger(__name__)


class InspectionImageService:
    """
    Domain service for images attached to inspections.
    """

    def __init__(
        self,
        image_repository: InspectionImageRepository = Depends(),
        inspection_repository: InspectionRepository = Depends(),
        file_storage: LocalFileStorage = Depends(get_file_storage),
    ):
        self.image_repository = image_repository
        self.inspection_repository = inspection_repository
        self.file_storage = file_storage

    async def get_images_by_inspection_id(
        self,
        inspection_id: int,
        user_id: int,
        is_admin: bool,
    ) -> Optional[List[InspectionImageDTO]]:
        """
        Images of one inspection, oldest first.

        Returns:
            None if the inspection does not exist
        """
        inspection = await self.inspection_repository.get_by_id(inspection_id)
        if inspection is None:
            return None

        ensure_inspection_access(inspection, user_id, is_admin, "view images of")
        images = await self.image_repository.get_by_inspection_id(inspection_id)
        return [InspectionImageDTO.model_validate(i) for i in images]

    async def get_image_by_id(self, image_id: int, user_id: int, is_admin: bool) -> Optional[InspectionImageDTO]:
        image = await self.image_repository.get_by_id(image_id)
        if image is None:
            return None

        inspection = await self.inspection_repository.get_by_id(image.inspection_id)
        if inspection is None:
            return None

        ensure_inspection_access(inspection, user_id, is_admin, "view images of")
        return InspectionImageDTO.model_validate(image)

    async def create_image(
        self,
        data: CreateInspectionImageDTO,
        user_id: int,
        is_admin: bool,
    ) -> InspectionImageDTO:
        """
        Attach an image path to an inspection.

        Raises:
            InvalidReferenceError: If the inspection does not exist
            AuthorizationError: If the caller is neither owner nor Admin
        """
        await self._ensure_parent(data.inspection_id, user_id, is_admin)

        now = datetime.now(timezone.utc)
        image = InspectionImageModel(
            inspection_id=data.inspection_id,
            image=data.image,
            created_at=now,
            updated_at=now,
        )

        await self.image_repository.add(image)
        await self.image_repository.commit()

        logger.info(f"Image {image.id} added to inspection {data.inspection_id} by user {user_id}")
        return InspectionImageDTO.model_validate(image)

    async def upload_image(
        self,
        inspection_id: int,
        content: bytes,
        filename: str,
        user_id: int,
        is_admin: bool,
    ) -> InspectionImageDTO:
        """
        Store an uploaded file and attach its path to an inspection.

        The parent and ownership checks run before anything is written to disk.

        Raises:
            InvalidReferenceError: If the inspection does not exist
            AuthorizationError: If the caller is neither owner nor Admin
            ValidationError: If the file is not an acceptable image
        """
        await self._ensure_parent(inspection_id, user_id, is_admin)

        path = await self.file_storage.save(content, filename)
        try:
            return await self.create_image(
                CreateInspectionImageDTO(inspection_id=inspection_id, image=path),
                user_id,
                is_admin,
            )
        except Exception:
            # No row will point at the file
            logger.warning(f"Image record for {path} was not saved, removing the stored file")
            await self.file_storage.delete(path)
            raise

    async def delete_image(self, image_id: int, user_id: int, is_admin: bool) -> bool:
        """
        Remove an image record, and its stored file once no other image uses it.

        Returns:
            False if the image or its inspection does not exist
        """
        image = await self.image_repository.get_by_id(image_id)
        if image is None:
            return False

        inspection = await self.inspection_repository.get_by_id(image.inspection_id)
        if inspection is None:
            return False

        ensure_inspection_access(inspection, user_id, is_admin, "delete images of")

        path = image.image
        await self.image_repository.remove(image)
        await self.image_repository.commit()

        # Other images may still point at the same stored file
        still_referenced = await self.image_repository.first_or_default(InspectionImageModel.image == path)
        if still_referenced is None:
            await self.file_storage.delete(path)
        else:
            logger.debug(f"Stored file {path} kept, still used by image {still_referenced.id}")

        logger.info(f"Image {image_id} deleted by user {user_id}")
        return True

    async def _ensure_parent(self, inspection_id: int, user_id: int, is_admin: bool) -> None:
        inspection = await self.inspection_repository.get_by_id(inspection_id)
        if inspection is None:
            logger.warning(f"Image rejected, inspection {inspection_id} not found")
            raise InvalidReferenceError(
                "Inspection not found",
                resource_type="inspection",
                resource_id=inspection_id,
            )

        ensure_inspection_access(inspection, user_id, is_admin, "add images to")
