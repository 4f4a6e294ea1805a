# 📄 File: agroscan/modules/inspection_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the fixed choices used on inspection records
# 🧪 Purpose (Technical Summary):
# Package initialization exporting inspection and analysis enumerations
# 🔗 Dependencies:
# inspection.py
# 🔄 Connected Modules / Calls From:
# ORM models, DTOs, services

from .inspection import AnalysisStatus, InspectionCategory, InspectionStatus

__all__ = ["AnalysisStatus", "InspectionCategory", "InspectionStatus"]
