"""Global exception handlers.

AppError renders its kind-mapped status and message. Framework HTTP errors
(unknown route, wrong method) and request parsing errors use the same
``{"status", "message"}`` body. Anything else is a 500 with a generic message.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import GENERIC_ERROR_MESSAGE, AppError
from ..core.validation import describe_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_app_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_app_error_handler(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.is_client_error:
            logger.info(
                f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message}"
            )
        else:
            logger.error(
                f"Internal error on {request.method} {request.url.path}: {exc.message}",
                exc_info=exc,
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes, wrong methods and other framework-raised errors."""
        outcome = "fail" if exc.status_code < 500 else "error"
        message = GENERIC_ERROR_MESSAGE
        if outcome == "fail" and isinstance(exc.detail, str):
            message = exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": outcome, "message": message},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle malformed JSON and bad query/path parameters."""
        message = ", ".join(_describe_request_error(err) for err in exc.errors())
        logger.info(f"Validation error on {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": "fail", "message": message},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": GENERIC_ERROR_MESSAGE},
        )


def _describe_request_error(error: Dict[str, Any]) -> str:
    if error["type"] == "json_invalid":
        return "Request body must be valid JSON."
    # drop the "body"/"query"/"path" prefix so messages read like service ones
    loc = tuple(error.get("loc") or ())[1:]
    return describe_error({**error, "loc": loc})
