"""
Security utilities for JWT issuance/validation and password hashing.
Provides the password hasher and token service used by authentication.
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from ..config.settings import TokenSettings, get_settings

logger = logging.getLogger(__name__)

# Role claim key used by .NET identity consumers of the same token
MS_ROLE_CLAIM = "http://schemas.microsoft.com/ws/2008/06/identity/claims/role"


class PasswordHasher:
    """
    Salted one-way password hashing backed by passlib's bcrypt_sha256 scheme.

    The password is pre-hashed with SHA-256 so that bytes past bcrypt's
    72-byte input limit still count.
    """

    def __init__(self, rounds: int = 12):
        self.context = CryptContext(
            schemes=["bcrypt_sha256"],
            deprecated="auto",
            bcrypt_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt over its SHA-256 digest.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password (salt embedded)
        """
        hashed = self.context.hash(password)
        logger.debug("Password hashed successfully")
        return hashed

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Malformed or unrecognised hash strings verify as False.
        """
        try:
            return self.context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification error: {e}")
            return False


class IssuedToken(BaseModel):
    """A freshly signed token and the instant it stops being accepted."""
    token: str
    expires_at: datetime


class TokenClaims(BaseModel):
    """Verified identity carried by a bearer token."""
    user_id: int
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and validates signed, time-limited identity tokens.

    Validation never raises: any signature, issuer, audience, expiry or
    format failure is reported as None. Expiry is checked with no leeway.
    """

    def __init__(
        self,
        settings: TokenSettings,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.settings = settings
        self.clock = clock

    def issue(self, user: Any) -> IssuedToken:
        """
        Sign a token for a user.

        Args:
            user: Entity exposing id, email, first_name, last_name and role

        Returns:
            IssuedToken: Encoded JWT and its expiry (taken from the exp claim)
        """
        now = self.clock()
        expires_at = now + timedelta(minutes=self.settings.expiration_minutes)
        role = user.role.value if isinstance(user.role, Enum) else str(user.role)

        claims = {
            "sub": str(user.id),
            "email": user.email,
            "name": f"{user.first_name} {user.last_name}",
            "role": role,
            MS_ROLE_CLAIM: role,
            "iss": self.settings.issuer,
            "aud": self.settings.audience,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }

        token = jwt.encode(claims, self.settings.secret_key, algorithm=self.settings.algorithm)
        logger.debug(f"Access token issued for user: {user.id}")

        return IssuedToken(
            token=token,
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )

    def decode(self, token: Optional[str]) -> Optional[TokenClaims]:
        """
        Verify a token and return its identity claims.

        Returns:
            TokenClaims or None when the token is invalid, expired or
            its subject is not an integer user id
        """
        if not token:
            return None

        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self.settings.secret_key,
                algorithms=[self.settings.algorithm],
                audience=self.settings.audience,
                issuer=self.settings.issuer,
                options={"require_exp": True, "require_sub": True, "leeway": 0},
            )
        except JWTError as e:
            logger.debug(f"JWT validation failed: {e}")
            return None

        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Token subject is not a valid user id")
            return None

        return TokenClaims(
            user_id=user_id,
            email=payload.get("email"),
            name=payload.get("name"),
            role=payload.get("role") or payload.get(MS_ROLE_CLAIM),
        )

    def validate(self, token: Optional[str]) -> Optional[int]:
        """Return the user id a valid token was issued for, else None."""
        claims = self.decode(token)
        return claims.user_id if claims else None


# =============================================================================
# FACTORIES
# =============================================================================

@lru_cache()
def get_password_hasher() -> PasswordHasher:
    """Get cached password hasher configured from settings."""
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache()
def get_token_service() -> TokenService:
    """Get cached token service configured from settings."""
    return TokenService(get_settings().token_settings)
