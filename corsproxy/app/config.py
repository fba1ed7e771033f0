"""
Configuration module for the CORS forwarding proxy.

This module uses Pydantic Settings to load and validate environment variables
for the listening socket, logging and the outbound fetch.

Environment variables are loaded from .env file or system environment.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Passed explicitly into the application factory; nothing here is read
    from module globals at request time.
    """

    # =========================================================================
    # Server Configuration
    # =========================================================================

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the proxy server",
    )

    PORT: int = Field(
        default=3000,
        description="Port to bind the proxy server",
        ge=1,
        le=65535,
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # =========================================================================
    # Outbound Fetch Configuration
    # =========================================================================

    UPSTREAM_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Outbound fetch timeout in seconds (unset waits indefinitely)",
        gt=0,
    )

    FOLLOW_REDIRECTS: bool = Field(
        default=True,
        description="Follow redirects returned by the upstream server",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def local_url(self) -> str:
        """URL printed in the startup confirmation line."""
        return f"http://localhost:{self.PORT}"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate LOG_LEVEL is a standard logging level name.

        Raises:
            ValueError: If the level is not recognised
        """
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get or create a cached Settings instance.

    Only the process entry points call this; the application factory takes
    its settings as an argument.

    Raises:
        ValidationError: If an environment variable is present but invalid.
    """
    return Settings()
