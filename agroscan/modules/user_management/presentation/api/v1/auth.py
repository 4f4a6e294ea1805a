# 📄 File: agroscan/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for signing up and logging in. Both hand back
# a pass (token) that the app sends with every later request.
#
# 🧪 Purpose (Technical Summary):
# FastAPI authentication endpoints. Registration always creates a Farmer and returns
# 201 with an AuthResponseDTO; login returns the same shape. Both are rate limited
# per client address through slowapi.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - agroscan.modules.user_management.domain.services.auth_service (AuthService)
# - agroscan.modules.user_management.application.dto.user_dto (request/response records)
# - agroscan.shared.core.rate_limiter (slowapi limiter)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.api.v1.router (router inclusion under /auth)
# - Frontend applications (registration and login screens)

"""
Authentication API Endpoints

Endpoints:
- POST /register: Create a Farmer account and sign it in
- POST /login: Email/password authentication

Failures surface as AgroScanException subclasses and are rendered by the
application's exception handler (409 duplicate email, 401 bad credentials).
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from agroscan.modules.user_management.application.dto.user_dto import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from agroscan.modules.user_management.domain.services.auth_service import AuthService
from agroscan.shared.core.rate_limiter import auth_rate_limit, limiter

logger = logging.getLogger(__name__)

# Create router
auth_router = APIRouter()


@auth_router.post(
    "/register",
    response_model=AuthResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account",
    description="Register a new Farmer account and return an access token",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "Email already exists"},
        422: {"description": "Validation error"},
        429: {"description": "Too many registration attempts"},
    }
)
@limiter.limit(auth_rate_limit)
async def register(
    request: Request,
    registration_data: RegisterRequestDTO,
    auth_service: AuthService = Depends(),
) -> AuthResponseDTO:
    """
    Register a new user account.

    Any role in the request body is ignored; new accounts are Farmers.

    Args:
        request: FastAPI request object for rate limiting
        registration_data: User registration information
        auth_service: Injected authentication service

    Returns:
        AuthResponseDTO: Token, its expiry and the created user
    """
    logger.info(f"User registration attempt for email: {registration_data.email}")
    return await auth_service.register(registration_data)


@auth_router.post(
    "/login",
    response_model=AuthResponseDTO,
    summary="User authentication",
    description="Authenticate user with email and password",
    responses={
        200: {"description": "Authentication successful"},
        401: {"description": "Invalid email or password"},
        429: {"description": "Too many login attempts"},
    }
)
@limiter.limit(auth_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequestDTO,
    auth_service: AuthService = Depends(),
) -> AuthResponseDTO:
    """
    Authenticate user with email and password.

    Unknown email and wrong password produce the same 401 response.
    """
    logger.info(f"Login attempt for email: {login_data.email}")
    return await auth_service.login(login_data)
