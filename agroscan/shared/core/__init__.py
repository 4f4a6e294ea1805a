"""
Core utilities package for AgroScan.
Provides exceptions, security, the repository contract and request identity.
"""

from .exceptions import (
    AgroScanException,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DatabaseError,
    DuplicateResourceError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)

from .security import (
    PasswordHasher,
    TokenService,
    get_password_hasher,
    get_token_service,
)

from .repository import GenericRepository

from .dependencies import (
    CurrentUser,
    can_view_all,
    get_current_admin_user,
    get_current_user,
)

__all__ = [
    # Exceptions
    "AgroScanException",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DatabaseError",
    "DuplicateResourceError",
    "InvalidReferenceError",
    "NotFoundError",
    "ValidationError",

    # Security
    "PasswordHasher",
    "TokenService",
    "get_password_hasher",
    "get_token_service",

    # Repository
    "GenericRepository",

    # Dependencies
    "CurrentUser",
    "can_view_all",
    "get_current_admin_user",
    "get_current_user",
]
