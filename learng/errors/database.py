from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from learng.errors.base import BaseAppError, create_exception_handler
from learng.monitoring import get_logger

logger = get_logger(__name__)


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when a database operation cannot be completed."""

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DuplicateEntryError(DatabaseError):
    """Exception raised when attempting to create a duplicate entry."""

    def __init__(
        self,
        detail: str = "A record with this value already exists",
    ) -> None:
        super().__init__(detail, HTTP_409_CONFLICT)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    def __init__(
        self,
        detail: str = "Record not found",
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ResourceNotFoundError(RecordNotFoundError):
    """A journey, scenario or word (or one of its ancestors) does not exist."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource.capitalize()} not found")
        self.resource = resource
        self.resource_id = resource_id


class LookupTimeoutError(DatabaseError):
    """Exception raised when a lookup does not return in time."""

    def __init__(
        self,
        detail: str = "Service temporarily unavailable",
    ) -> None:
        super().__init__(detail, HTTP_503_SERVICE_UNAVAILABLE)


database_exception_handler = create_exception_handler(logger)
