"""Runtime configuration read from environment variables."""

import logging
import os
from typing import Literal, Optional, get_args

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000/api/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LOG_LEVELS = get_args(LogLevel)


class Settings(BaseModel):
    """Client settings."""

    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the order API")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds")
    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """
        Build settings from the environment.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Settings with environment overrides applied
        """
        if environ is None:
            environ = dict(os.environ)

        values: dict[str, str] = {}
        api_url = environ.get("PACKAGE_ORDER_API_URL")
        if api_url:
            values["api_url"] = api_url
        timeout = environ.get("PACKAGE_ORDER_TIMEOUT")
        if timeout:
            values["timeout"] = timeout
        log_level = environ.get("PACKAGE_ORDER_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level

        settings = cls(**values)
        logger.debug(f"Loaded settings: api_url={settings.api_url}, timeout={settings.timeout}")
        return settings
