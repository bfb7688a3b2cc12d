# 📄 File: soundcave/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches every error that happens while answering a request and turns it into one
# consistent, friendly error message, without leaking internal details to the caller.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware and exception handlers. Assigns a request id per
# request, renders SoundCaveException subclasses in a fixed JSON envelope, and converts
# any unexpected exception into an opaque InternalError carrying a correlation id.
# 🔗 Dependencies:
# FastAPI, starlette, soundcave.shared.core.exceptions, soundcave.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# soundcave.main (middleware and handler registration), all API endpoints

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from soundcave.shared.core.exceptions import InternalError, SoundCaveException
from soundcave.shared.utils.logging import bind_request_id, request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request_id_var.get() or None


def create_error_response(
    error_code: str,
    message: str,
    status_code: int = 500,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        error_code: Error code identifier
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        request_id: Request correlation ID
        headers: Extra response headers

    Returns:
        JSON error response
    """
    error_response = {
        "error": {
            "code": error_code,
            "message": message,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": request_id,
        }
    }

    response = JSONResponse(status_code=status_code, content=error_response, headers=headers)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    response.headers["X-Error-Code"] = error_code
    return response


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log ``exc`` with its traceback and answer with an opaque InternalError."""
    request_id = get_request_id(request) or str(uuid.uuid4())
    logger.error(
        f"Unhandled {type(exc).__name__} in {request.method} {request.url.path} "
        f"(correlation_id={request_id})",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    internal = InternalError(correlation_id=request_id)
    return create_error_response(
        internal.error_code,
        internal.message,
        status_code=internal.status_code,
        details=internal.details,
        request_id=request_id,
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Outermost middleware: assigns the request id and turns anything that
    escaped the exception handlers into an opaque 500.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = bind_request_id(request_id)

        try:
            response = await call_next(request)
        except Exception as exc:
            return internal_error_response(request, exc)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def soundcave_exception_handler(request: Request, exc: SoundCaveException) -> JSONResponse:
    """Handle application exceptions."""
    request_id = get_request_id(request)
    details = dict(exc.details)

    if isinstance(exc, InternalError) and not exc.correlation_id:
        details["correlation_id"] = request_id

    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.error_code} in {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return create_error_response(
        exc.error_code,
        exc.message,
        status_code=exc.status_code,
        details=details,
        request_id=request_id,
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures in the shared error envelope."""
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Validation error"),
            "type": error.get("type", "validation_error"),
        }
        for error in exc.errors()
    ]
    return create_error_response(
        "VALIDATION_ERROR",
        "Request validation failed",
        status_code=422,
        details={"validation_errors": validation_errors},
        request_id=get_request_id(request),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP errors such as unknown routes and wrong methods."""
    code = "NOT_FOUND" if exc.status_code == 404 else f"HTTP_{exc.status_code}"
    details = {"path": str(request.url.path)} if exc.status_code == 404 else {}
    return create_error_response(
        code,
        str(exc.detail),
        status_code=exc.status_code,
        details=details,
        request_id=get_request_id(request),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SoundCaveException, soundcave_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
