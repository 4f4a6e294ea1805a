# 📄 File: agroscan/modules/inspection_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business rules for inspections, their photos and their analysis results
# 🧪 Purpose (Technical Summary):
# Package initialization for inspection domain services
# 🔗 Dependencies:
# Service modules
# 🔄 Connected Modules / Calls From:
# Inspection API routers

from .inspection_analysis_service import InspectionAnalysisService
from .inspection_image_service import InspectionImageService
from .inspection_service import InspectionService

__all__ = ["InspectionAnalysisService", "InspectionImageService", "InspectionService"]
