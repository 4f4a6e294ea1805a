# 📄 File: agroscan/modules/inspection_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access contracts for inspections, their images and their analyses
# 🧪 Purpose (Technical Summary):
# Package initialization for inspection repository interfaces
# 🔗 Dependencies:
# Repository interface modules
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations, agroscan.main

from .inspection_analysis_repository import InspectionAnalysisRepository
from .inspection_image_repository import InspectionImageRepository
from .inspection_repository import InspectionRepository

__all__ = [
    "InspectionAnalysisRepository",
    "InspectionImageRepository",
    "InspectionRepository",
]
