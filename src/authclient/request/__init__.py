"""
Authenticated request pipeline.

- types: RequestConfig and the Success/Failure response union
- interceptors: outgoing (auth, URL templating) and incoming (normalize, refresh, report)
- refresh: default refresh call and single-flight gate
- client: RequestClient and the process-wide configure()/request() façade
"""

from .client import (
    RequestClient,
    configure,
    configure_from_settings,
    get_client,
    request,
    reset,
)
from .interceptors import RequestInterceptor, ResponseInterceptor, substitute_path_variables
from .refresh import SingleFlight, make_refresh_handler
from .types import ApiEnvelope, Failure, RefreshTokens, RequestConfig, Response, Success

__all__ = [
    "RequestClient",
    "RequestConfig",
    "Response",
    "Success",
    "Failure",
    "ApiEnvelope",
    "RefreshTokens",
    "RequestInterceptor",
    "ResponseInterceptor",
    "SingleFlight",
    "substitute_path_variables",
    "make_refresh_handler",
    "configure",
    "configure_from_settings",
    "get_client",
    "request",
    "reset",
]
