"""Exception handlers rendering every error as a ``{message[, error]}`` body."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from pdf_content.application.dto.pdf_content_models import ErrorResponse

ROUTE_NOT_FOUND_MESSAGE = "API route not found."
INVALID_REQUEST_MESSAGE = "Invalid request."
UNHANDLED_ERROR_MESSAGE = "Something went wrong!"

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised by routes to produce a structured error response."""

    def __init__(self, *, status_code: int, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


def _error_response(status_code: int, *, message: str, error: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _handle_api_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ApiError)
    return _error_response(exc.status_code, message=exc.message, error=exc.error)


async def _handle_http_exception(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    # Unknown paths and wrong methods on known paths are both unmatched routes.
    if exc.status_code in {404, 405}:
        logger.info("api_route_not_found method=%s path=%s", request.method, request.url.path)
        return _error_response(404, message=ROUTE_NOT_FOUND_MESSAGE)
    return _error_response(exc.status_code, message=str(exc.detail))


async def _handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    logger.info(
        "api_request_invalid method=%s path=%s errors=%s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return _error_response(400, message=INVALID_REQUEST_MESSAGE)


async def _render_unexpected_errors(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:  # noqa: BLE001
        return _handle_unexpected_error(request, exc)


def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "api_unhandled_error method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(500, message=UNHANDLED_ERROR_MESSAGE, error=str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach structured error handlers to the application.

    Call before adding CORS middleware so unexpected-error responses pass back
    through it.
    """

    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.middleware("http")(_render_unexpected_errors)
