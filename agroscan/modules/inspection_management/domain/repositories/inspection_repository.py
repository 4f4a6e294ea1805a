# 📄 File: agroscan/modules/inspection_management/domain/repositories/inspection_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how inspections are looked up and saved: one farmer's list, newest first, or a
# single inspection together with its owner, photos and analysis results
# 🧪 Purpose (Technical Summary):
# Repository interface for Inspection entities extending the generic repository
# 🔗 Dependencies:
# agroscan.shared.core.repository, typing, abc
# 🔄 Connected Modules / Calls From:
# inspection services, infrastructure implementation, agroscan.main (DI binding)

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from agroscan.shared.core.repository import GenericRepository

if TYPE_CHECKING:
    from agroscan.modules.inspection_management.infrastructure.database.models import InspectionModel


class InspectionRepository(GenericRepository["InspectionModel"]):
    """
    Repository interface for Inspection entity data access operations.
    """

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List["InspectionModel"]:
        """
        Get all inspections owned by a user.

        Args:
            user_id: Owning user

        Returns:
            Inspections ordered newest first, with images and analyses attached
        """
        pass

    @abstractmethod
    async def get_with_related_data(self, inspection_id: int) -> Optional["InspectionModel"]:
        """
        Get one inspection with its owner, images and analyses attached.

        Returns:
            Inspection if found, None otherwise
        """
        pass
