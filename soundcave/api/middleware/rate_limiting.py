# 📄 File: soundcave/api/middleware/rate_limiting.py
# 🧭 Purpose (Layman Explanation):
# Stops any single client from hammering the login and sign-up endpoints
# by limiting how many requests it can send per minute.
# 🧪 Purpose (Technical Summary):
# Shared slowapi Limiter keyed on client address, enabled per settings, with a 429
# handler that renders the standard error envelope.
# 🔗 Dependencies:
# slowapi, FastAPI, soundcave.api.middleware.error_handling
# 🔄 Connected Modules / Calls From:
# soundcave.main (configuration), auth router (per-endpoint limits)

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from soundcave.shared.config.settings import Settings, get_settings

from .error_handling import create_error_response, get_request_id

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)


def auth_rate_limit() -> str:
    return get_settings().AUTH_RATE_LIMIT


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return create_error_response(
        "RATE_LIMIT_EXCEEDED",
        f"Rate limit of {exc.detail} exceeded. Please try again later.",
        status_code=429,
        details={"rate_limit": str(exc.detail)},
        request_id=get_request_id(request),
        headers={"Retry-After": "60"},
    )


def configure_rate_limiting(app: FastAPI, settings: Settings) -> None:
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
