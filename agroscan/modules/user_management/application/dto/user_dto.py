# 📄 File: agroscan/modules/user_management/application/dto/user_dto.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data packages for user accounts and logins that move between
# the API and the services, making sure a password hash is never sent back out.
#
# 🧪 Purpose (Technical Summary):
# Pydantic inbound/outbound records for registration, login, user CRUD and the
# authentication response, with field length limits matching the users table.
#
# 🔗 Dependencies:
# - pydantic (email-validator for EmailStr)
# - agroscan.modules.user_management.domain.models.user (UserRole)
#
# 🔄 Connected Modules / Calls From:
# - auth_service.py and user_service.py (input and output records)
# - presentation.api.v1.auth and presentation.api.v1.users (request/response bodies)

"""
User Data Transfer Objects (DTOs)

DTO Classes:
- RegisterRequestDTO / LoginRequestDTO: Authentication input
- CreateUserDTO / UpdateUserDTO: Admin and profile management input
- UserDTO: Public user view (no password hash)
- AuthResponseDTO: Issued token, its expiry and the user
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from agroscan.modules.user_management.domain.models.user import UserRole


class RegisterRequestDTO(BaseModel):
    """
    Self-service registration input.

    A role sent by the client is accepted but ignored; registration
    always creates a Farmer.
    """

    first_name: str = Field(..., min_length=1, max_length=100, examples=["Ana"])
    last_name: str = Field(..., min_length=1, max_length=100, examples=["Lee"])
    email: EmailStr = Field(..., max_length=255, examples=["ana@example.com"])
    password: str = Field(..., min_length=6, max_length=255)
    role: Optional[Any] = Field(default=None, description="Ignored")


class LoginRequestDTO(BaseModel):
    """User authentication credentials."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=255)


class CreateUserDTO(BaseModel):
    """Admin user creation input; the role is set directly."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=255)
    role: UserRole = UserRole.FARMER


class UpdateUserDTO(BaseModel):
    """
    User update input.

    Leaving role unset keeps the current role.
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    role: Optional[UserRole] = None


class UserDTO(BaseModel):
    """Public user representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class AuthResponseDTO(BaseModel):
    """Authentication success: bearer token, its expiry and the user."""

    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserDTO
