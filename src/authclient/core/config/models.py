"""
Configuration models for authclient.

Pydantic-based settings that can be supplied through AUTHCLIENT_* environment
variables or a ``.env`` file.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authclient.constants import (
    DEFAULT_REFRESH_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_FILE,
    MAX_TIMEOUT_SECONDS,
)
from authclient.logging import LoggingConfig


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Valid console log formats."""

    CONSOLE = "console"
    JSON = "json"
    RICH = "rich"


class ClientSettings(BaseSettings):
    """Settings for the process-wide request client."""

    base_url: Optional[str] = Field(None, description="Base URL every call is resolved against")
    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Per-call timeout in seconds",
    )
    refresh_url: str = Field(
        DEFAULT_REFRESH_URL, description="Endpoint exchanging a refresh token for new tokens"
    )
    token_file: Path = Field(DEFAULT_TOKEN_FILE, description="Token storage file")
    log_level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    log_format: LogFormat = Field(LogFormat.CONSOLE, description="Log format")
    log_file: Optional[Path] = Field(None, description="Also log to this file when set")

    model_config = SettingsConfigDict(
        env_prefix="AUTHCLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @field_validator("token_file", "log_file")
    @classmethod
    def expand_paths(cls, v: Optional[Path]) -> Optional[Path]:
        if v is None:
            return v
        return Path(v).expanduser()

    def to_logging_config(self) -> LoggingConfig:
        """Build the LoggingConfig described by these settings."""
        output = ["console", "file"] if self.log_file else ["console"]
        return LoggingConfig(
            level=self.log_level.value,
            format_type=self.log_format.value,
            output=output,
            file_path=self.log_file,
        )
