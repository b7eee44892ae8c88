"""Exception handlers for the FastAPI application.

Maps trusty exceptions to structured JSON error responses at the transport
boundary. A store outage is reported as an error status, never as a denial.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.exceptions import (
    TrustyError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)


async def trusty_exception_handler(request: Request, exc: TrustyError) -> JSONResponse:
    """Render a TrustyError as a JSON error response."""
    status_code = get_http_status_code(exc)

    if isinstance(exc, ValidationError):
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    else:
        logger.error(f"{request.method} {request.url.path} -> {status_code}: {exc.__class__.__name__}: {exc.message}")

    return JSONResponse(status_code=status_code, content=create_error_response(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any other exception as an opaque 500."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "Internal server error",
                "details": {},
                "type": "InternalServerError",
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach trusty exception handlers to the application."""
    app.add_exception_handler(TrustyError, trusty_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
