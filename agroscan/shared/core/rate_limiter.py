"""
Rate limiting for AgroScan.
Per-client limits on the authentication endpoints, backed by slowapi's
in-memory storage.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config.settings import get_settings

_settings = get_settings()

# Shared limiter; the application registers it on app.state
limiter = Limiter(
    key_func=get_remote_address,
    enabled=_settings.RATE_LIMIT_ENABLED,
)


def auth_rate_limit() -> str:
    """Limit string applied to register and login, e.g. "5/minute"."""
    return get_settings().AUTH_RATE_LIMIT
