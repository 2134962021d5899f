from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from structlog.stdlib import BoundLogger

from learng.utils.helpers import host

INTERNAL_ERROR_MESSAGE = "Internal server error"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = INTERNAL_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_response(detail: str, status_code: int, **extra: object) -> ORJSONResponse:
    """Build the uniform ``{"error": ...}`` response body."""
    return ORJSONResponse(content={"error": detail, **extra}, status_code=status_code)


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Client errors are logged at info (warning for authentication and
    authorization failures) and echo the exception's detail. Server errors
    are logged with their traceback and never expose the detail of a 500.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", INTERNAL_ERROR_MESSAGE)
        log_fields = {
            "status_code": status_code,
            "path": request.url.path,
            "ip": host(request),
            "error_type": type(exc).__name__,
        }
        if reason := getattr(exc, "reason", None):
            log_fields["reason"] = reason

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(detail, exc_info=exc, **log_fields)
            if status_code == HTTP_500_INTERNAL_SERVER_ERROR:
                detail = INTERNAL_ERROR_MESSAGE
        elif status_code in (HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN):
            logger.warning(detail, **log_fields)
        else:
            logger.info(detail, **log_fields)

        return error_response(detail, status_code)

    return handler
