"""
Request and response interceptors.

The request interceptor turns a RequestConfig into an outgoing call: it
attaches the bearer token and fills in URL placeholders. The response
interceptor normalizes what came back: it unwraps successful envelopes,
refreshes the access token once on a 401, and reports every other failure.
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Mapping, Optional

import requests

from ..constants import (
    AUTHORIZATION_HEADER,
    BEARER_PREFIX,
    FALLBACK_ERROR_MESSAGE,
    FALLBACK_ERROR_STATUS,
    HTTP_STATUS_UNAUTHORIZED,
)
from ..exceptions import ApiError, RefreshTokenError, RequestError
from ..logging import AuthClientLogger, get_logger
from ..reporting import ErrorHandler
from ..tokens import TokenManager
from .envelope import parse_envelope
from .refresh import RefreshHandler, SingleFlight, exchange_refresh_token
from .types import Failure, PathValue, RefreshTokens, RequestConfig, Response, Success


def substitute_path_variables(url: str, path_variables: Optional[Mapping[str, PathValue]]) -> str:
    """Replace every ``{key}`` in ``url`` with the stringified mapping value.

    Placeholders without a value are left as they are.

    >>> substitute_path_variables("/users/{id}/posts/{post}", {"id": 1})
    '/users/1/posts/{post}'
    """
    if not path_variables:
        return url
    for key, value in path_variables.items():
        url = url.replace("{" + str(key) + "}", str(value))
    return url


@dataclass
class OutgoingCall:
    """A RequestConfig after the request interceptor ran."""

    config: RequestConfig
    url: str
    headers: Dict[str, str]
    token: Optional[str] = None


class RequestInterceptor:
    """Outgoing transform: auth header first, then URL templating."""

    def __init__(self, token_manager: TokenManager):
        self.token_manager = token_manager

    def __call__(self, config: RequestConfig) -> OutgoingCall:
        headers = dict(config.headers or {})
        token = None

        if not config.ignore_auth:
            token = self.token_manager.get_token()
            if token:
                headers[AUTHORIZATION_HEADER] = f"{BEARER_PREFIX} {token}"

        url = substitute_path_variables(config.url, config.path_variables)
        return OutgoingCall(config=config, url=url, headers=headers, token=token)


class ResponseInterceptor:
    """Incoming transform for both successful and failed calls."""

    def __init__(
        self,
        token_manager: TokenManager,
        error_handler: ErrorHandler,
        refresh_handler: RefreshHandler,
        refresh_gate: Optional[SingleFlight[RefreshTokens]] = None,
        logger: Optional[AuthClientLogger] = None,
    ):
        self.token_manager = token_manager
        self.error_handler = error_handler
        self.refresh_handler = refresh_handler
        self.refresh_gate = refresh_gate or SingleFlight()
        self.logger = logger or get_logger(__name__)

    def on_success(self, response: requests.Response, call: OutgoingCall) -> Success:
        """Unwrap a 2xx response.

        Raises:
            ApiError: The envelope reports ``success: false``. The status is
                always 400 and the call flags do not apply.
            TransportError: The body is not a valid envelope.
        """
        envelope = parse_envelope(response)
        if not envelope.success:
            self.logger.info(
                "Business failure in 2xx response",
                url=call.url,
                status=response.status_code,
            )
            raise ApiError(envelope.error_message or FALLBACK_ERROR_MESSAGE, url=call.url)
        return Success(envelope.data)

    def on_failure(
        self,
        error: RequestError,
        call: OutgoingCall,
        resend: Callable[[RequestConfig], Response],
    ) -> Response:
        """Handle a failed call.

        A first 401 refreshes the tokens and re-issues the call through
        ``resend``. Refresh failures clear both tokens and always raise.
        Any other failure is reported unless ``silent_error`` is set, then
        raised if ``throw_error`` is set, otherwise returned as a Failure.
        """
        config = call.config

        if error.status_code == HTTP_STATUS_UNAUTHORIZED and not config.retried:
            retry_config = replace(config, retried=True)
            self._refresh_after_unauthorized(call)
            self.logger.debug("Re-issuing call after token refresh", url=call.url)
            return resend(retry_config)

        message = error.best_message
        self.logger.debug(
            "Call failed",
            url=call.url,
            status=error.status_code,
            error_type=type(error).__name__,
        )

        if not config.silent_error:
            self.error_handler.show_error(message)

        if config.throw_error:
            raise error

        return Failure(
            error_code=error.status_code or FALLBACK_ERROR_STATUS,
            error_message=message,
        )

    def _refresh_after_unauthorized(self, call: OutgoingCall) -> None:
        if self.refresh_gate.held_by_current_thread():
            # The refresh handler itself went through this client and got a 401
            raise RefreshTokenError(
                f"Token refresh failed: {call.url} answered 401 during refresh"
            )

        current = self.token_manager.get_token()
        if call.token and current and current != call.token:
            # Another call already refreshed since this one was sent
            self.logger.debug("Access token changed while call was in flight", url=call.url)
            return

        try:
            self.refresh_gate.do(self._refresh_tokens)
        except Exception:
            self.token_manager.remove_token()
            self.token_manager.remove_refresh_token()
            self.logger.warning("Token refresh failed, stored tokens cleared")
            raise

    def _refresh_tokens(self) -> RefreshTokens:
        refresh_token = self.token_manager.get_refresh_token()
        if not refresh_token:
            raise RefreshTokenError("No refresh token available")

        self.logger.info("Refreshing access token")
        tokens = exchange_refresh_token(self.refresh_handler, refresh_token)
        self.token_manager.set_token(tokens.access)
        self.token_manager.set_refresh_token(tokens.refresh)
        return tokens
