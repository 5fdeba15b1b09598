"""
authclient Exception Hierarchy

Exception Hierarchy:
    AuthClientError (base)
    ├── ConfigurationError
    │   ├── MissingConfigurationError
    │   ├── InvalidConfigurationError
    │   └── UninitializedClientError
    └── RequestError
        ├── ApiError
        ├── TransportError
        │   └── HttpStatusError
        └── RefreshTokenError

This package provides focused exception components:
- base: Core AuthClientError base class
- config: Configuration and setup exceptions
- request: Call, response and token refresh exceptions
"""

from .base import AuthClientError, ExceptionContext

# Configuration exceptions
from .config import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
    UninitializedClientError,
)

# Request exceptions
from .request import (
    ApiError,
    HttpStatusError,
    RefreshTokenError,
    RequestError,
    TransportError,
)

__all__ = [
    # Base
    "AuthClientError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "UninitializedClientError",
    # Requests
    "RequestError",
    "ApiError",
    "TransportError",
    "HttpStatusError",
    "RefreshTokenError",
]
