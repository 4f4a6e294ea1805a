# 📄 File: agroscan/modules/inspection_management/domain/repositories/inspection_image_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the photos of an inspection are looked up and saved
# 🧪 Purpose (Technical Summary):
# Repository interface for InspectionImage entities extending the generic repository
# 🔗 Dependencies:
# agroscan.shared.core.repository, typing, abc
# 🔄 Connected Modules / Calls From:
# inspection_image_service.py, infrastructure implementation, agroscan.main (DI binding)

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from agroscan.shared.core.repository import GenericRepository

if TYPE_CHECKING:
    from agroscan.modules.inspection_management.infrastructure.database.models import InspectionImageModel


class InspectionImageRepository(GenericRepository["InspectionImageModel"]):
    """Repository interface for images attached to inspections."""

    @abstractmethod
    async def get_by_inspection_id(self, inspection_id: int) -> List["InspectionImageModel"]:
        """
        Get all images of an inspection, oldest first.

        Args:
            inspection_id: Parent inspection
        """
        pass
