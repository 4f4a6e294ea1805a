# 📄 File: agroscan/modules/inspection_management/application/dto/inspection_image_dto.py
# 🧭 Purpose (Layman Explanation):
# Defines the shape of an inspection photo record: which inspection it belongs to and
# where the picture is stored.
#
# 🧪 Purpose (Technical Summary):
# Pydantic inbound/outbound records for inspection images. Only the stored path or URL
# travels through the service layer, never the file bytes.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - inspection_image_service.py
# - presentation.api.v1.inspection_images

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateInspectionImageDTO(BaseModel):
    inspection_id: int = Field(..., gt=0)
    image: str = Field(..., min_length=1, max_length=500, description="Stored image path or URL")


class InspectionImageDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    inspection_id: int
    image: str
    created_at: datetime
    updated_at: datetime
