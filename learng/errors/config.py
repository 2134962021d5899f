from learng.errors.base import BaseAppError


class ConfigurationError(BaseAppError):
    """Raised at startup when required configuration is missing or unusable."""

    def __init__(self, detail: str = "Invalid application configuration") -> None:
        super().__init__(detail)
