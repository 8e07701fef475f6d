"""Translation of failures into HTTP error responses.

Every error body has the shape `{statusCode, message, detail}`; validation
failures also list the individual messages under `errors`.
"""

import logging
from typing import List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist.api.schemas import ErrorResponse
from todolist.common.errors import ErrorKind
from todolist.common.result import Result

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
}


class ApiError(Exception):
    """An expected failure to be rendered as an error response."""

    def __init__(self, status_code: int, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = list(errors or [])


def unwrap(result: Result):
    """Return the value of a successful result or raise the matching ApiError."""
    if result.is_success:
        return result.value
    status_code = STATUS_BY_KIND.get(result.kind, status.HTTP_400_BAD_REQUEST)
    raise ApiError(status_code, result.message, result.errors)


def error_response(
    status_code: int,
    message: str,
    detail: Optional[str] = None,
    errors: Optional[List[str]] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message, detail=detail, errors=errors or [])
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, by_alias=True),
        headers=headers,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, detail=exc.message, errors=exc.errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(
        exc.status_code,
        message,
        detail=message,
        headers=getattr(exc, "headers", None),
    )


def _format_validation_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(loc)
    msg = error.get("msg", "Invalid value")
    return f"{field}: {msg}" if field else msg


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [_format_validation_error(e) for e in exc.errors()]
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "One or more validation errors occurred",
        detail=", ".join(errors),
        errors=errors,
    )


def make_unhandled_exception_handler(expose_detail: bool):
    """Build the catch-all handler.

    The raw exception text is only returned when `expose_detail` is set;
    it is always logged with the stack trace.
    """

    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        detail = f"{type(exc).__name__}: {exc}" if expose_detail else None
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE, detail=detail)

    return unhandled_exception_handler
