# 📄 File: agroscan/modules/inspection_management/application/dto/inspection_analysis_dto.py
# 🧭 Purpose (Layman Explanation):
# Defines the shape of an analysis result: its progress, how confident it is (from 0 to 1),
# what was found and what treatment is recommended.
#
# 🧪 Purpose (Technical Summary):
# Pydantic inbound/outbound records for inspection analyses. The confidence range is
# validated here at the boundary and again by a database check constraint.
#
# 🔗 Dependencies:
# - pydantic
# - agroscan.modules.inspection_management.domain.models (AnalysisStatus)
#
# 🔄 Connected Modules / Calls From:
# - inspection_analysis_service.py
# - presentation.api.v1.inspection_analyses

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from agroscan.modules.inspection_management.domain.models.inspection import AnalysisStatus


class AnalysisInputDTO(BaseModel):
    status: AnalysisStatus = AnalysisStatus.PENDING
    confidence_score: float = Field(..., ge=0.0, le=1.0, examples=[0.87])
    description: Optional[str] = Field(default=None, max_length=2000)
    treatment_recommendation: Optional[str] = Field(default=None, max_length=2000)


class CreateInspectionAnalysisDTO(AnalysisInputDTO):
    inspection_id: int = Field(..., gt=0)


class UpdateInspectionAnalysisDTO(AnalysisInputDTO):
    """Full replacement of an analysis' editable fields."""


class InspectionAnalysisDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    inspection_id: int
    status: AnalysisStatus
    confidence_score: float
    description: Optional[str] = None
    treatment_recommendation: Optional[str] = None
    created_at: datetime
    updated_at: datetime
