"""Per-client request limiter shared by the drink routes."""

from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from scp294.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def current_limit() -> str:
    """Read the limit at request time so configuration changes apply."""
    return settings.rate_limit
