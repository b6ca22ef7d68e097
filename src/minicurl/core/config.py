"""minicurl configuration.

Application settings loaded from environment variables with MINICURL_ prefix.
Per-request options come from the command line; these settings cover the
ambient behavior that has no flag.

Example:
    >>> from minicurl.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.buffer_size
    1024
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from minicurl import __version__


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with MINICURL_ prefix.

    Example:
        >>> from minicurl.core.config import Settings
        >>> s = Settings(timeout=5.0)
        >>> s.timeout
        5.0
        >>> s.follow_redirects
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="MINICURL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    # HTTP
    user_agent: str = Field(default=f"minicurl/{__version__}", description="User-Agent header")
    timeout: float | None = Field(default=None, gt=0, description="Request timeout; unset blocks")
    follow_redirects: bool = Field(default=True)

    # Transfer
    buffer_size: int = Field(default=1024, ge=1, description="Copy buffer size in bytes")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from minicurl.core.config import get_settings
        >>> get_settings(buffer_size=4096).buffer_size
        4096
    """
    return Settings(**overrides)
