"""Application configuration."""

from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden with environment variables.
    """

    PROJECT_NAME: str = "User Service"

    # Database
    DATABASE_URL: str = "sqlite:///./users.db"
    SQL_ECHO: bool = False
    POOL_PRE_PING: bool = True
    CREATE_SCHEMA: bool = True

    # Environment
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra environment variables
    )

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        # Validate critical settings
        critical_settings = [
            ("DATABASE_URL", self.DATABASE_URL),
        ]

        missing_settings = [name for name, value in critical_settings if not value]
        if missing_settings:
            raise ValueError(
                f"Critical settings missing: {', '.join(missing_settings)}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()
