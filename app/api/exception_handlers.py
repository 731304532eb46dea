"""Global exception handlers that map failures to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.errors import INTERNAL_ERROR, PolicyStoreError
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Return a standardized error response with category and message."""
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def policy_store_error_handler(request: Request, exc: PolicyStoreError) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR,
        str(exc),
    )


def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR,
        str(exc) or "Something went wrong!",
    )


def register_exception_handlers(app):
    """Register exception handlers on the FastAPI app."""
    app.add_exception_handler(PolicyStoreError, policy_store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
