"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the learng content backend.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
VALID_ROLES = frozenset({"admin", "learner"})
JOURNEY_STATUSES = frozenset({"draft", "published", "archived"})
GENERATION_METHODS = frozenset({"manual", "ai_image", "ai_audio", "ai_both"})

MIN_PASSWORD_LENGTH = 8

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "learng Backend"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api/v1"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/learng.log"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./learng.db"
    DATABASE_ECHO: bool = False
    LOOKUP_TIMEOUT_SECONDS: float = 5.0

    # Authentication
    JWT_SECRET: SecretStr = SecretStr("")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"

    # CORS
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",  # Vite development
        "http://127.0.0.1:5173",
    ]


@dataclass(frozen=True)
class Argon2Config:
    """Argon2id cost parameters for one security level."""

    memory_cost: int  # KiB
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": Argon2Config(memory_cost=256 * 1024, time_cost=3, parallelism=4),
}


settings = Settings()
