"""
Access token refresh.

Provides the default refresh-endpoint call and the single-flight gate that
lets concurrent 401s share one refresh instead of each issuing their own.
"""

import threading
from typing import Callable, Generic, Optional, TypeVar

from pydantic import ValidationError

from ..exceptions import HttpStatusError, RefreshTokenError, TransportError
from ..infrastructure.http import HttpClient
from .envelope import extract_error_message, parse_envelope
from .types import Failure, RefreshTokens, Response, Success

T = TypeVar("T")

RefreshHandler = Callable[[str], Response]


class ReentrantFlightError(RuntimeError):
    """Raised when the leader of a flight calls back into the same gate."""


class _InFlight(Generic[T]):
    def __init__(self):
        self.owner = threading.get_ident()
        self.done = threading.Event()
        self.result: Optional[T] = None
        self.error: Optional[BaseException] = None


class SingleFlight(Generic[T]):
    """Run a function once for all callers that arrive while it is running.

    The first caller (the leader) executes the function. Callers arriving
    before it finishes block and receive the leader's result, or its
    exception re-raised. A call arriving after completion starts a new flight.

    The leader cannot join its own flight: a nested call from the leader's
    thread raises ReentrantFlightError instead of waiting on itself.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._current: Optional[_InFlight[T]] = None

    def held_by_current_thread(self) -> bool:
        """True while the calling thread is the leader of an open flight."""
        with self._lock:
            flight = self._current
        return flight is not None and flight.owner == threading.get_ident()

    def do(self, fn: Callable[[], T]) -> T:
        with self._lock:
            flight = self._current
            leader = flight is None
            if leader:
                flight = _InFlight()
                self._current = flight

        if not leader:
            if flight.owner == threading.get_ident():
                raise ReentrantFlightError("SingleFlight.do called again by its own leader")
            flight.done.wait()
            if flight.error is not None:
                raise flight.error
            return flight.result

        try:
            flight.result = fn()
            return flight.result
        except BaseException as e:
            flight.error = e
            raise
        finally:
            with self._lock:
                self._current = None
            flight.done.set()


def make_refresh_handler(transport: HttpClient, refresh_url: str) -> RefreshHandler:
    """Build the default refresh collaborator.

    It posts ``{"refreshToken": ...}`` to ``refresh_url`` without an
    Authorization header and bypasses the interceptors, so a 401 from the
    refresh endpoint cannot start another refresh.
    """

    def post_refresh(refresh_token: str) -> Response:
        response = transport.send(
            "POST", refresh_url, json={"refreshToken": refresh_token}
        )
        if not response.ok:
            raise HttpStatusError(
                response.status_code,
                url=response.url,
                error_message=extract_error_message(response),
            )
        envelope = parse_envelope(response)
        if not envelope.success:
            return Failure(
                error_code=response.status_code,
                error_message=envelope.error_message or "",
            )
        return Success(envelope.data)

    return post_refresh


def exchange_refresh_token(handler: RefreshHandler, refresh_token: str) -> RefreshTokens:
    """Call ``handler`` and validate the new token pair.

    Raises:
        RefreshTokenError: The handler raised, returned a Failure, or
            returned data without both tokens
    """
    try:
        result = handler(refresh_token)
    except RefreshTokenError:
        raise
    except TransportError as e:
        raise RefreshTokenError(f"Token refresh failed: {e.best_message}", original_error=e) from e

    if not result.success:
        raise RefreshTokenError(f"Token refresh rejected: {result.error_message}")

    try:
        return RefreshTokens.model_validate(result.data)
    except ValidationError as e:
        raise RefreshTokenError(
            "Token refresh returned an invalid payload", original_error=e
        ) from e
