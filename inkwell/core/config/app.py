"""
Application-wide settings.
"""
from typing import List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, logging, CORS origins
    and pagination bounds.

    Security Note:
        - Ensure ALLOWED_ORIGINS is explicitly set to trusted domains in production
          to prevent unauthorized cross-origin requests.
    """
    PROJECT_NAME: str = "inkwell"
    VERSION: str = "0.1.0"
    APP_ENV: str = Field(
        default="development", pattern="^(development|test|staging|production)$"
    )
    DEBUG: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    ALLOWED_ORIGINS: Union[str, List[str]] = Field(default="http://localhost:3000")
    CORS_MAX_AGE: int = Field(ge=0, default=3600)

    PAGINATION_DEFAULT_LIMIT: int = Field(ge=1, default=10)
    PAGINATION_MAX_LIMIT: int = Field(ge=1, default=100)

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Accept ``ALLOWED_ORIGINS=https://a.example,https://b.example`` from the environment."""
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v
