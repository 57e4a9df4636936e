"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits. Each /users route
carries its own ``@limiter.limit`` decorator; no global middleware.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

DEFAULT_RATE_LIMIT = settings.rate_limit_default

limiter = Limiter(key_func=get_remote_address)
