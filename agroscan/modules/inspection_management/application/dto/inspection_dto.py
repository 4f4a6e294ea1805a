# 📄 File: agroscan/modules/inspection_management/application/dto/inspection_dto.py
# 🧭 Purpose (Layman Explanation):
# Defines the shape of an inspection when someone creates, edits or reads one, including
# the list of photo links that belong to it.
#
# 🧪 Purpose (Technical Summary):
# Pydantic inbound/outbound records for inspections with the same length limits as the
# inspections table; the outbound record flattens attached images to their paths.
#
# 🔗 Dependencies:
# - pydantic
# - agroscan.modules.inspection_management.domain.models (enums)
#
# 🔄 Connected Modules / Calls From:
# - inspection_service.py
# - presentation.api.v1.inspections

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from agroscan.modules.inspection_management.domain.models.inspection import (
    InspectionCategory,
    InspectionStatus,
)


class InspectionInputDTO(BaseModel):
    """Fields a caller may set on an inspection."""

    plant_name: str = Field(..., min_length=1, max_length=200, examples=["Tomato"])
    inspection_date: datetime
    country: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=1000)
    status: InspectionStatus = InspectionStatus.PENDING
    category: InspectionCategory


class CreateInspectionDTO(InspectionInputDTO):
    """Inspection creation input; the caller becomes the owner."""


class UpdateInspectionDTO(InspectionInputDTO):
    """Full replacement of an inspection's editable fields."""


class InspectionDTO(BaseModel):
    """Inspection view with the paths of its images, oldest first."""

    id: int
    plant_name: str
    inspection_date: datetime
    country: str
    state: str
    city: str
    notes: Optional[str] = None
    status: InspectionStatus
    category: InspectionCategory
    user_id: int
    created_at: datetime
    updated_at: datetime
    images: List[str] = Field(default_factory=list)

    @classmethod
    def from_model(cls, inspection) -> "InspectionDTO":
        return cls(
            id=inspection.id,
            plant_name=inspection.plant_name,
            inspection_date=inspection.inspection_date,
            country=inspection.country,
            state=inspection.state,
            city=inspection.city,
            notes=inspection.notes,
            status=inspection.status,
            category=inspection.category,
            user_id=inspection.user_id,
            created_at=inspection.created_at,
            updated_at=inspection.updated_at,
            images=[image.image for image in inspection.images],
        )
