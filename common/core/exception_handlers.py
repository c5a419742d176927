"""
Exception handlers translating application errors into HTTP responses.
"""

import traceback

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

from common.core.exceptions import (
    AppException,
    CompilationFailedError,
    MethodNotAllowedError,
)
from common.core.otel_axiom_exporter import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_SUMMARY = "Internal server error"


async def app_exception_handler(request: Request, exc: AppException):
    """Render an AppException with its own status code."""
    if isinstance(exc, (MethodNotAllowedError, CompilationFailedError)):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    if exc.status_code >= 500:
        return internal_error_response(exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def internal_error_response(exc: BaseException) -> JSONResponse:
    """500 envelope carrying the exception message and traceback.

    The traceback is exposed on purpose: callers are trusted internal clients.
    """
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    message = exc.message if isinstance(exc, AppException) else str(exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": INTERNAL_ERROR_SUMMARY,
            "message": message,
            "stack": stack,
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler for errors raised outside route bodies (e.g. dependencies)."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return internal_error_response(exc)
