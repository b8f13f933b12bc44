"""
Rate limiting for the pack service API.
Provides a process-wide slowapi limiter keyed by client address.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ..config.settings import get_settings


def api_rate_limit() -> str:
    """Current per-client limit string, e.g. ``120/minute``."""
    return get_settings().API_RATE_LIMIT


def create_limiter() -> Limiter:
    """
    Build the shared limiter.

    Storage is in memory, so limits are per process. Only routes decorated
    with ``limiter.limit(api_rate_limit)`` are limited; health routes are not.
    """
    settings = get_settings()
    return Limiter(
        key_func=get_remote_address,
        enabled=settings.RATE_LIMIT_ENABLED,
    )


limiter = create_limiter()
