"""Exception handlers rendering every API failure as ``{"error": "..."}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from candidate_tracker.core.constants import MSG_INTERNAL_ERROR, MSG_INVALID_BODY

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, message: str) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return create_error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "request_validation_failed",
        extra={"path": request.url.path, "errors": exc.errors()},
    )
    return create_error_response(400, MSG_INVALID_BODY)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        extra={"path": request.url.path, "error_message": str(exc)},
        exc_info=exc,
    )
    return create_error_response(500, MSG_INTERNAL_ERROR)


def register_exception_handlers(application: FastAPI) -> None:
    """Install the JSON error handlers on *application*."""
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
