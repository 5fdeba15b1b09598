"""
authclient: authenticated HTTP requests with token refresh.

A thin layer over requests that attaches bearer tokens, fills in
``{placeholder}`` path variables, refreshes the access token once on a 401
and routes failures to a pluggable error reporter.

Usage:
    import authclient

    authclient.configure("https://api.example.com", error_handler=authclient.LoggingErrorHandler())
    result = authclient.request(url="/users/{id}", path_variables={"id": 1})
    if result.success:
        print(result.data)
"""

__version__ = "0.1.0"

from .exceptions import (
    ApiError,
    AuthClientError,
    ConfigurationError,
    HttpStatusError,
    RefreshTokenError,
    RequestError,
    TransportError,
    UninitializedClientError,
)
from .reporting import CallbackErrorHandler, ConsoleErrorHandler, ErrorHandler, LoggingErrorHandler
from .request import (
    Failure,
    RequestClient,
    RequestConfig,
    Response,
    Success,
    configure,
    configure_from_settings,
    get_client,
    request,
    reset,
)
from .tokens import FileTokenManager, MemoryTokenManager, TokenManager

__all__ = [
    "__version__",
    "configure",
    "configure_from_settings",
    "get_client",
    "request",
    "reset",
    "RequestClient",
    "RequestConfig",
    "Response",
    "Success",
    "Failure",
    "TokenManager",
    "FileTokenManager",
    "MemoryTokenManager",
    "ErrorHandler",
    "LoggingErrorHandler",
    "ConsoleErrorHandler",
    "CallbackErrorHandler",
    "AuthClientError",
    "ConfigurationError",
    "UninitializedClientError",
    "RequestError",
    "ApiError",
    "TransportError",
    "HttpStatusError",
    "RefreshTokenError",
]
