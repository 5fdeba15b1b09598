"""
Configuration for authclient.

Usage:
    from authclient.core.config import ClientSettings

    settings = ClientSettings()            # reads AUTHCLIENT_* and .env
    settings = ClientSettings(base_url="https://api.example.com")
"""

from ...exceptions.config import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .models import ClientSettings, LogFormat, LogLevel

__all__ = [
    "ClientSettings",
    "LogFormat",
    "LogLevel",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
]
