"""
Request façade.

``RequestClient`` wires the transport, the token store, the error reporter
and the interceptor pair together. The module-level ``configure()`` and
``request()`` functions keep one process-wide client for code that prefers
a single shared instance over passing a client around.
"""

import threading
from dataclasses import replace
from typing import Any, Optional

import requests

from ..constants import DEFAULT_REFRESH_URL, DEFAULT_TIMEOUT_SECONDS, MAX_TIMEOUT_SECONDS
from ..core.config import ClientSettings
from ..exceptions import (
    HttpStatusError,
    InvalidConfigurationError,
    MissingConfigurationError,
    TransportError,
    UninitializedClientError,
)
from ..infrastructure.http import HttpClient
from ..logging import configure_logging, get_logger
from ..reporting import ErrorHandler
from ..tokens import FileTokenManager, TokenManager
from .envelope import extract_error_message
from .interceptors import RequestInterceptor, ResponseInterceptor
from .refresh import RefreshHandler, SingleFlight, make_refresh_handler
from .types import RequestConfig, Response


class RequestClient:
    """Authenticated request client bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        error_handler: Optional[ErrorHandler] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        token_manager: Optional[TokenManager] = None,
        refresh_handler: Optional[RefreshHandler] = None,
        refresh_url: str = DEFAULT_REFRESH_URL,
        session: Optional[requests.Session] = None,
        max_retries: int = 0,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL every call is resolved against
            error_handler: Reporter for failed calls (required)
            timeout: Per-call timeout in seconds (default 10s)
            token_manager: Token store, defaults to FileTokenManager()
            refresh_handler: Callable exchanging a refresh token for a
                Response whose data holds ``access`` and ``refresh``.
                Defaults to POSTing to ``refresh_url``.
            refresh_url: Endpoint used by the default refresh handler
            session: Optional existing requests session
            max_retries: Connection-level retries for idempotent methods

        Raises:
            MissingConfigurationError: base_url or error_handler is missing
            InvalidConfigurationError: error_handler has no show_error, or
                timeout is outside (0, 300] seconds
        """
        if not base_url:
            raise MissingConfigurationError("base_url")
        if error_handler is None:
            raise MissingConfigurationError(
                "error_handler",
                help_text="Pass an object with a show_error(message) method",
            )
        if not callable(getattr(error_handler, "show_error", None)):
            raise InvalidConfigurationError(
                "error_handler", error_handler, "an object with a show_error(message) method"
            )
        if not 0 < timeout <= MAX_TIMEOUT_SECONDS:
            raise InvalidConfigurationError(
                "timeout", timeout, f"seconds in (0, {MAX_TIMEOUT_SECONDS:g}]"
            )

        self.logger = get_logger(__name__)
        self.transport = HttpClient(
            base_url, session=session, timeout=timeout, max_retries=max_retries
        )
        self.token_manager: TokenManager = token_manager or FileTokenManager()
        self.error_handler = error_handler
        self.refresh_handler = refresh_handler or make_refresh_handler(
            self.transport, refresh_url
        )

        self.request_interceptor = RequestInterceptor(self.token_manager)
        self.response_interceptor = ResponseInterceptor(
            self.token_manager,
            self.error_handler,
            self.refresh_handler,
            refresh_gate=SingleFlight(),
            logger=self.logger,
        )

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    @property
    def timeout(self) -> float:
        return self.transport.timeout

    def request(self, config: Optional[RequestConfig] = None, **kwargs: Any) -> Response:
        """Send one call and return its normalized Response.

        Accepts a RequestConfig, keyword arguments naming RequestConfig
        fields, or both (keywords override the config's fields).

        Raises:
            ApiError: A 2xx response carried ``success: false``
            RefreshTokenError: A 401 could not be recovered by refreshing
            TransportError: The call failed and ``throw_error`` was set
        """
        if config is None:
            config = RequestConfig(**kwargs)
        else:
            config = replace(config, **kwargs)
        return self._dispatch(config)

    def get(self, url: str, **kwargs: Any) -> Response:
        return self.request(url=url, method="GET", **kwargs)

    def post(self, url: str, **kwargs: Any) -> Response:
        return self.request(url=url, method="POST", **kwargs)

    def put(self, url: str, **kwargs: Any) -> Response:
        return self.request(url=url, method="PUT", **kwargs)

    def patch(self, url: str, **kwargs: Any) -> Response:
        return self.request(url=url, method="PATCH", **kwargs)

    def delete(self, url: str, **kwargs: Any) -> Response:
        return self.request(url=url, method="DELETE", **kwargs)

    def _dispatch(self, config: RequestConfig) -> Response:
        call = self.request_interceptor(config)

        try:
            response = self.transport.send(
                config.method,
                call.url,
                params=config.params,
                json=config.json,
                data=config.data,
                headers=call.headers,
                timeout=config.timeout,
            )
            if not 200 <= response.status_code < 300:
                raise HttpStatusError(
                    response.status_code,
                    url=call.url,
                    error_message=extract_error_message(response),
                )
            return self.response_interceptor.on_success(response, call)
        except TransportError as e:
            error = e

        return self.response_interceptor.on_failure(error, call, self._dispatch)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.transport.close()

    def __enter__(self) -> "RequestClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RequestClient(base_url={self.base_url!r}, timeout={self.timeout})"


_client: Optional[RequestClient] = None
_client_lock = threading.Lock()


def configure(
    base_url: str,
    error_handler: Optional[ErrorHandler] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    token_manager: Optional[TokenManager] = None,
    refresh_handler: Optional[RefreshHandler] = None,
    refresh_url: str = DEFAULT_REFRESH_URL,
    **kwargs: Any,
) -> RequestClient:
    """Create the process-wide client, replacing (and closing) any previous one.

    ``timeout`` is in seconds (default 10.0, i.e. 10000 ms) and may not exceed 300.
    """
    global _client

    client = RequestClient(
        base_url,
        error_handler=error_handler,
        timeout=timeout,
        token_manager=token_manager,
        refresh_handler=refresh_handler,
        refresh_url=refresh_url,
        **kwargs,
    )
    with _client_lock:
        previous, _client = _client, client
    if previous is not None:
        previous.close()
    return client


def configure_from_settings(
    error_handler: Optional[ErrorHandler] = None,
    settings: Optional[ClientSettings] = None,
    token_manager: Optional[TokenManager] = None,
    refresh_handler: Optional[RefreshHandler] = None,
) -> RequestClient:
    """Configure logging and the process-wide client from ClientSettings.

    ``settings`` defaults to ``ClientSettings()``, which reads AUTHCLIENT_*
    environment variables and ``.env``.
    """
    settings = settings or ClientSettings()
    if not settings.base_url:
        raise MissingConfigurationError(
            "base_url", help_text="Set AUTHCLIENT_BASE_URL or pass base_url in ClientSettings"
        )

    configure_logging(settings.to_logging_config())
    return configure(
        settings.base_url,
        error_handler=error_handler,
        timeout=settings.timeout,
        token_manager=token_manager or FileTokenManager(settings.token_file),
        refresh_handler=refresh_handler,
        refresh_url=settings.refresh_url,
    )


def get_client() -> RequestClient:
    """Return the process-wide client.

    Raises:
        UninitializedClientError: configure() has not been called
    """
    client = _client
    if client is None:
        raise UninitializedClientError()
    return client


def request(config: Optional[RequestConfig] = None, **kwargs: Any) -> Response:
    """Send one call through the process-wide client."""
    return get_client().request(config, **kwargs)


def reset() -> None:
    """Close and forget the process-wide client."""
    global _client
    with _client_lock:
        previous, _client = _client, None
    if previous is not None:
        previous.close()
