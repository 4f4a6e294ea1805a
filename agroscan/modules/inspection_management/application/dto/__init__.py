# 📄 File: agroscan/modules/inspection_management/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the data shapes used for inspections, photos and analysis results
# 🧪 Purpose (Technical Summary):
# Package initialization exporting inspection, image and analysis DTOs
# 🔗 Dependencies:
# DTO modules
# 🔄 Connected Modules / Calls From:
# Inspection services and API routers

from .inspection_analysis_dto import (
    CreateInspectionAnalysisDTO,
    InspectionAnalysisDTO,
    UpdateInspectionAnalysisDTO,
)
from .inspection_dto import CreateInspectionDTO, InspectionDTO, UpdateInspectionDTO
from .inspection_image_dto import CreateInspectionImageDTO, InspectionImageDTO

__all__ = [
    "CreateInspectionAnalysisDTO",
    "CreateInspectionDTO",
    "CreateInspectionImageDTO",
    "InspectionAnalysisDTO",
    "InspectionDTO",
    "InspectionImageDTO",
    "UpdateInspectionAnalysisDTO",
    "UpdateInspectionDTO",
]
