"""Authentication and authorization errors."""

from starlette.status import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)

from learng.errors.base import BaseAppError, create_exception_handler
from learng.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised for unknown email and wrong password alike."""

    def __init__(self) -> None:
        super().__init__("invalid email or password")


class MissingAuthorizationHeaderError(UserAuthenticationError):
    """Raised when a protected request carries no Authorization header."""

    def __init__(self) -> None:
        super().__init__("Missing authorization header")


class InvalidAuthorizationHeaderError(UserAuthenticationError):
    """Raised when the Authorization header is not ``Bearer <token>``."""

    def __init__(self) -> None:
        super().__init__("Invalid authorization header format")


class InvalidTokenError(UserAuthenticationError):
    """
    Base class for token decoding failures.

    Every subclass renders the same client message. ``reason`` is logged
    and never sent to the caller.
    """

    reason = "invalid"

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


class TokenMalformedError(InvalidTokenError):
    """The token is not a well-formed encoded credential."""

    reason = "malformed"


class TokenSignatureError(InvalidTokenError):
    """The signature does not match the header and payload."""

    reason = "signature-invalid"


class TokenExpiredError(InvalidTokenError):
    """The token is past its expiry time."""

    reason = "expired"


class AuthorizationError(BaseAppError):
    """Base class for authenticated-but-forbidden errors."""

    def __init__(self, detail: str = "Forbidden") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class InsufficientRoleError(AuthorizationError):
    """Raised by the role guard."""

    def __init__(self) -> None:
        super().__init__("Insufficient permissions")


class PermissionDeniedError(AuthorizationError):
    """Raised when the caller does not own the journey they act on."""

    def __init__(self, action: str) -> None:
        super().__init__(f"You don't have permission to {action} this journey")
        self.action = action


class UserNotFoundError(BaseAppError):
    """Raised when the token subject has no user record."""

    def __init__(self) -> None:
        super().__init__("User not found", HTTP_404_NOT_FOUND)


auth_exception_handler = create_exception_handler(logger)
