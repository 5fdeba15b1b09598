"""
Configuration-specific exceptions.

Raised when the request client is set up incorrectly or used before setup.
"""

from typing import Any, Optional

from .base import AuthClientError, ExceptionContext


class ConfigurationError(AuthClientError):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: str = "CONFIG_ERROR",
    ):
        super().__init__(
            message, ExceptionContext(help_text=help_text, error_code=error_code)
        )


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, help_text: Optional[str] = None):
        message = f"Missing required configuration: '{field}'"
        if not help_text:
            help_text = (
                f"Pass '{field}' to configure() or set it through the "
                f"AUTHCLIENT_* environment variables"
            )
        super().__init__(message, help_text, error_code="CONFIG_MISSING")
        self.field = field


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        message = f"Invalid configuration for '{field}': got {value!r}, expected {expected}"
        super().__init__(message, error_code="CONFIG_INVALID")
        self.field = field
        self.value = value
        self.expected = expected


class UninitializedClientError(ConfigurationError):
    """Raised when a request is issued before configure() was called."""

    def __init__(self):
        super().__init__(
            "Request client not initialized. Call configure() first.",
            error_code="CLIENT_UNINITIALIZED",
        )
