"""
Common FastAPI dependencies for AgroScan.
Provides bearer-token authentication and role-based access checks.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .exceptions import AuthenticationError, AuthorizationError
from .security import TokenService, get_token_service
from ..utils.logging import user_id_var

logger = logging.getLogger(__name__)

ADMIN_ROLE = "Admin"

# Security scheme for OpenAPI documentation; missing headers are handled below
security = HTTPBearer(auto_error=False)


class CurrentUser:
    """User information extracted from a validated JWT."""

    def __init__(
        self,
        user_id: int,
        email: Optional[str] = None,
        name: Optional[str] = None,
        role: Optional[str] = None,
    ):
        self.user_id = user_id
        self.email = email
        self.name = name
        self.role = role

    @property
    def is_admin(self) -> bool:
        """Check if user has admin privileges."""
        return can_view_all(self)

    def __repr__(self) -> str:
        return f"<CurrentUser(user_id={self.user_id}, role={self.role})>"


def can_view_all(identity: Optional[CurrentUser]) -> bool:
    """
    Capability check for global visibility.

    Admins see and manage every user's records; everybody else is
    limited to their own.
    """
    return identity is not None and identity.role == ADMIN_ROLE


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Resolve the caller from the Authorization bearer token.

    Fails closed: a missing header, a token that does not verify, or a
    subject that is not an integer user id all count as unauthenticated.

    Raises:
        AuthenticationError: If the caller is not authenticated
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Not authenticated")

    claims = token_service.decode(credentials.credentials)
    if claims is None:
        logger.warning("Rejected invalid or expired bearer token")
        raise AuthenticationError("Invalid or expired token")

    user_id_var.set(str(claims.user_id))

    return CurrentUser(
        user_id=claims.user_id,
        email=claims.email,
        name=claims.name,
        role=claims.role,
    )


async def get_current_admin_user(
    current_user: CurrentUser = Depends(get_current_user)
) -> CurrentUser:
    """
    Get current user with admin privileges.

    Raises:
        AuthorizationError: If user is not an admin
    """
    if not current_user.is_admin:
        logger.warning(f"Non-admin user attempted admin access: {current_user.user_id}")
        raise AuthorizationError(
            "Administrator privileges required",
            user_id=current_user.user_id,
        )
    return current_user
