"""Request and input validation errors."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST

from learng.errors.base import BaseAppError, create_exception_handler, error_response
from learng.monitoring import get_logger
from learng.utils.helpers import host

logger = get_logger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


class InputValidationError(BaseAppError):
    """Raised when a field fails a business validation rule."""

    def __init__(self, detail: str = "Validation Error") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class InvalidRequestBodyError(InputValidationError):
    """Raised when a body cannot be read as the expected JSON object."""

    def __init__(self) -> None:
        super().__init__(INVALID_BODY_MESSAGE)


class PatchValidationError(InputValidationError):
    """Raised when a partial update carries a value of the wrong shape."""

    def __init__(self, field: str, detail: str | None = None) -> None:
        super().__init__(detail or f"invalid {field}")
        self.field = field


input_validation_exception_handler = create_exception_handler(logger)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render pydantic request validation failures as a 400.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with the generic body message and a field summary.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = [
        {
            # Skip the leading 'body' / 'query' / 'path' segment
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        for error in exec_error.errors()
    ]

    logger.info(
        INVALID_BODY_MESSAGE,
        status_code=HTTP_400_BAD_REQUEST,
        path=request.url.path,
        ip=host(request),
        errors=formatted_errors,
    )

    return error_response(INVALID_BODY_MESSAGE, HTTP_400_BAD_REQUEST, errors=formatted_errors)


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) in the same body shape."""
    http_error = cast(StarletteHTTPException, exc)
    logger.info(
        http_error.detail,
        status_code=http_error.status_code,
        path=request.url.path,
        ip=host(request),
    )
    response = error_response(str(http_error.detail), http_error.status_code)
    if http_error.headers:
        response.headers.update(http_error.headers)
    return response
