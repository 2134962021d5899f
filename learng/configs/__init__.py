from learng.configs.settings import (
    CONFIG_MAP,
    DEFAULT_PAGE_LIMIT,
    GENERATION_METHODS,
    JOURNEY_STATUSES,
    MAX_PAGE_LIMIT,
    MIN_PASSWORD_LENGTH,
    VALID_ROLES,
    Argon2Config,
    Settings,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "DEFAULT_PAGE_LIMIT",
    "GENERATION_METHODS",
    "JOURNEY_STATUSES",
    "MAX_PAGE_LIMIT",
    "MIN_PASSWORD_LENGTH",
    "Settings",
    "VALID_ROLES",
    "settings",
]
