# 📄 File: agroscan/modules/inspection_management/domain/repositories/inspection_analysis_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the analysis results of an inspection are looked up and saved, including
# finding the most recent result
# 🧪 Purpose (Technical Summary):
# Repository interface for InspectionAnalysis entities extending the generic repository
# 🔗 Dependencies:
# agroscan.shared.core.repository, typing, abc
# 🔄 Connected Modules / Calls From:
# inspection_analysis_service.py, infrastructure implementation, agroscan.main (DI binding)

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from agroscan.shared.core.repository import GenericRepository

if TYPE_CHECKING:
    from agroscan.modules.inspection_management.infrastructure.database.models import InspectionAnalysisModel


class InspectionAnalysisRepository(GenericRepository["InspectionAnalysisModel"]):
    """
    Repository interface for analyses attached to inspections.

    Ordering Notes:
    - Newest first by creation time
    - Analyses created in the same instant are ordered by id, newest id first
    """

    @abstractmethod
    async def get_by_inspection_id(self, inspection_id: int) -> List["InspectionAnalysisModel"]:
        """
        Get all analyses of an inspection, newest first.

        Args:
            inspection_id: Parent inspection
        """
        pass

    @abstractmethod
    async def get_latest_by_inspection_id(self, inspection_id: int) -> Optional["InspectionAnalysisModel"]:
        """
        Get the most recently created analysis of an inspection.

        Returns:
            Latest analysis, or None if the inspection has none
        """
        pass
