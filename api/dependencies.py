"""Request-scoped accessors for the process-wide services on `app.state`."""

import math
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from api.services.rate_limiter import SlidingWindowRateLimiter
from config import AppSettings
from transcript.proofreading import Proofreader

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


def client_id(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_rate_limiter(request: Request) -> SlidingWindowRateLimiter:
    return request.app.state.rate_limiter


def get_proofreader(request: Request) -> Optional[Proofreader]:
    return request.app.state.proofreader


def check_rate_limit(request: Request) -> Optional[JSONResponse]:
    """
    Charge one correction request to the caller.

    Returns:
        A 429 response with Retry-After when the caller is over its limit, else None
    """
    admission = get_rate_limiter(request).admit(client_id(request))
    if admission:
        return None
    retry_after = max(1, math.ceil(admission.retry_after_ms / 1000))
    return JSONResponse(
        status_code=429,
        content={"error": RATE_LIMIT_MESSAGE},
        headers={"Retry-After": str(retry_after)},
    )
