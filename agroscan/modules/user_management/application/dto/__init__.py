# 📄 File: agroscan/modules/user_management/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the data shapes for accounts and logins
# 🧪 Purpose (Technical Summary):
# Package initialization exporting user DTOs
# 🔗 Dependencies:
# user_dto
# 🔄 Connected Modules / Calls From:
# Auth and user services, auth and users routers

from .user_dto import (
    AuthResponseDTO,
    CreateUserDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UpdateUserDTO,
    UserDTO,
)

__all__ = [
    "AuthResponseDTO",
    "CreateUserDTO",
    "LoginRequestDTO",
    "RegisterRequestDTO",
    "UpdateUserDTO",
    "UserDTO",
]
