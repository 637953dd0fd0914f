"""
Global exception handlers for the API layer.

These handlers transform domain exceptions (from the service layer)
into appropriate HTTP responses, so endpoints don't need repetitive
try-except blocks.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from candlelens.core.exceptions import (
    AppException,
    UpstreamServiceError,
    ValidationError,
)
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)


async def validation_exception_handler(
        request: Request, exc: ValidationError
) -> JSONResponse:
    """
    Handle ValidationError (rejected uploads).
    Maps to HTTP 400 Bad Request.

    Note: This is different from Pydantic validation errors,
    which are handled by FastAPI automatically.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


async def upstream_exception_handler(
        request: Request, exc: UpstreamServiceError
) -> JSONResponse:
    """
    Handle UpstreamServiceError (vision provider unavailable or failing).
    Maps to HTTP 502 Bad Gateway.
    """
    logger.error(f"Upstream failure on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Fallback handler for any AppException that wasn't caught by more specific handlers.
    Maps to HTTP 500 Internal Server Error.
    """
    logger.error(f"Unhandled application error: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


# Dictionary mapping exception types to their handlers
# Registered all at once in main.py
EXCEPTION_HANDLERS = {
    ValidationError: validation_exception_handler,
    UpstreamServiceError: upstream_exception_handler,
    AppException: app_exception_handler,
}
