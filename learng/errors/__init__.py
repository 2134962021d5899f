from learng.errors.auth import (
    AuthorizationError,
    InsufficientRoleError,
    InvalidAuthorizationHeaderError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingAuthorizationHeaderError,
    PermissionDeniedError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
    UserAuthenticationError,
    UserNotFoundError,
    auth_exception_handler,
)
from learng.errors.base import (
    INTERNAL_ERROR_MESSAGE,
    BaseAppError,
    create_exception_handler,
    error_response,
)
from learng.errors.config import ConfigurationError
from learng.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    LookupTimeoutError,
    RecordNotFoundError,
    ResourceNotFoundError,
    database_exception_handler,
)
from learng.errors.password_hasher import PasswordHashingError, password_hashing_exception_handler
from learng.errors.validation import (
    INVALID_BODY_MESSAGE,
    InputValidationError,
    InvalidRequestBodyError,
    PatchValidationError,
    http_exception_handler,
    input_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "INVALID_BODY_MESSAGE",
    "AuthorizationError",
    "BaseAppError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "InputValidationError",
    "InsufficientRoleError",
    "InvalidAuthorizationHeaderError",
    "InvalidCredentialsError",
    "InvalidRequestBodyError",
    "InvalidTokenError",
    "LookupTimeoutError",
    "MissingAuthorizationHeaderError",
    "PasswordHashingError",
    "PatchValidationError",
    "PermissionDeniedError",
    "RecordNotFoundError",
    "ResourceNotFoundError",
    "TokenExpiredError",
    "TokenMalformedError",
    "TokenSignatureError",
    "UserAuthenticationError",
    "UserNotFoundError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_response",
    "http_exception_handler",
    "input_validation_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
