"""Rate limiting for the parse endpoint (slowapi)."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from mailticket.config import settings

logger = logging.getLogger(__name__)

TOO_MANY_REQUESTS = "Too many requests. Please wait a moment before trying again."

# Moving window: at most N parses within any trailing window, per client address
limiter = Limiter(key_func=get_remote_address, strategy="moving-window")


def parse_rate_limit() -> str:
    """Limit string for /tickets/parse, read from settings on every request."""
    return f"{settings.rate_limit_max_requests}/{settings.rate_limit_window_seconds} second"


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    client = get_remote_address(request)
    logger.warning("Rate limit exceeded for %s (%s)", client, exc.detail)
    return JSONResponse(status_code=429, content={"detail": TOO_MANY_REQUESTS})
