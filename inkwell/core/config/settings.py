"""Main application settings and configuration management.

This module composes all the application settings from the different modules
(app, database, auth, server) into a single, accessible `Settings` class.

It loads settings from environment variables and .env files, validates them,
and provides a single `settings` object for use by process wiring.

Environment Support:
- Development: Uses .env
- Test: Uses .env.test when present
- Staging: Uses .env.staging when present
- Production: Uses .env.production when present
"""

import logging
import os
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .server import ServerSettings

logger = logging.getLogger(__name__)

ENV_FILES = {
    "development": ".env",
    "test": ".env.test",
    "staging": ".env.staging",
    "production": ".env.production",
}


class Settings(AppSettings, DatabaseSettings, AuthSettings, ServerSettings):
    """The main settings class that aggregates all application configurations.

    It inherits from all the specialized settings classes, providing a unified
    interface to all configuration parameters. Services never read it directly;
    the container passes the relevant values into their constructors.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @model_validator(mode="after")
    def check_pagination_bounds(self) -> "Settings":
        if self.PAGINATION_DEFAULT_LIMIT > self.PAGINATION_MAX_LIMIT:
            raise ValueError(
                "PAGINATION_DEFAULT_LIMIT must not exceed PAGINATION_MAX_LIMIT"
            )
        return self


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance
    """
    env = os.getenv("APP_ENV", "development")
    env_file = ENV_FILES.get(env, ".env")

    if env != "development" and Path(env_file).exists():
        logger.info("Loading environment configuration from %s", env_file)
        return Settings(_env_file=env_file)
    if Path(".env").exists():
        logger.info("Loading environment configuration from .env (environment: %s)", env)
        return Settings()
    logger.info("No .env file found, using environment variables only (environment: %s)", env)
    return Settings()


# Create a singleton instance of the settings to be used by process wiring.
settings = create_settings()
