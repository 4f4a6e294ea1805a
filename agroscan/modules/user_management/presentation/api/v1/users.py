# 📄 File: agroscan/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for managing user accounts: admins can list and create
# accounts, and everyone can view, edit or delete their own account.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user CRUD endpoints. Listing and creation require the Admin role; single-user
# reads, updates and deletes are allowed for the account holder or an Admin. Missing
# users are turned into 404 here.
#
# 🔗 Dependencies:
# - FastAPI router, status codes, Response
# - agroscan.modules.user_management.domain.services.user_service (UserService)
# - agroscan.shared.core.dependencies (get_current_user, get_current_admin_user)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.api.v1.router (router inclusion under /users)
# - Admin dashboard and account settings pages

"""
Users API Endpoints

Endpoints:
- GET /: List users (admin only)
- POST /: Create a user with any role (admin only)
- GET /{user_id}: Get a user (self or admin)
- PUT /{user_id}: Update a user (self or admin; only admins change roles)
- DELETE /{user_id}: Delete a user and their inspections (self or admin)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from agroscan.modules.user_management.application.dto.user_dto import (
    CreateUserDTO,
    UpdateUserDTO,
    UserDTO,
)
from agroscan.modules.user_management.domain.services.user_service import UserService
from agroscan.shared.core.dependencies import (
    CurrentUser,
    get_current_admin_user,
    get_current_user,
)
from agroscan.shared.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# Create router
users_router = APIRouter()


@users_router.get(
    "",
    response_model=List[UserDTO],
    summary="List users",
    description="List every user account (admin only)",
    responses={
        401: {"description": "Authentication required"},
        403: {"description": "Administrator privileges required"},
    }
)
async def list_users(
    current_user: CurrentUser = Depends(get_current_admin_user),
    user_service: UserService = Depends(),
) -> List[UserDTO]:
    return await user_service.get_all_users()


@users_router.post(
    "",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a user account with an explicit role (admin only)",
    responses={
        201: {"description": "User created"},
        403: {"description": "Administrator privileges required"},
        409: {"description": "Email already exists"},
    }
)
async def create_user(
    user_data: CreateUserDTO,
    current_user: CurrentUser = Depends(get_current_admin_user),
    user_service: UserService = Depends(),
) -> UserDTO:
    logger.info(f"Admin {current_user.user_id} creating user {user_data.email}")
    return await user_service.create_user(user_data)


@users_router.get(
    "/{user_id}",
    response_model=UserDTO,
    summary="Get user information",
    responses={
        403: {"description": "Access denied"},
        404: {"description": "User not found"},
    }
)
async def get_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
) -> UserDTO:
    """
    Get specific user information.

    Farmers may only read their own account.
    """
    user = await user_service.get_user_by_id(user_id, current_user.user_id, current_user.is_admin)
    if user is None:
        raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
    return user


@users_router.put(
    "/{user_id}",
    response_model=UserDTO,
    summary="Update user",
    responses={
        403: {"description": "Access denied"},
        404: {"description": "User not found"},
        409: {"description": "Email already exists"},
    }
)
async def update_user(
    user_id: int,
    update_data: UpdateUserDTO,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
) -> UserDTO:
    user = await user_service.update_user(
        user_id,
        update_data,
        current_user.user_id,
        current_user.is_admin,
    )
    if user is None:
        raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
    return user


@users_router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    description="Delete a user account; their inspections are removed with it",
    responses={
        204: {"description": "User deleted"},
        403: {"description": "Access denied"},
        404: {"description": "User not found"},
    }
)
async def delete_user(
    user_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    user_service: UserService = Depends(),
) -> Response:
    deleted = await user_service.delete_user(user_id, current_user.user_id, current_user.is_admin)
    if not deleted:
        raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
