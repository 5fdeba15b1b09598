"""
Request pipeline exceptions.

All exceptions raised while sending a call, normalizing its response
or refreshing the access token.
"""

from typing import Optional

from ..constants import BUSINESS_FAILURE_STATUS
from .base import AuthClientError, ExceptionContext


class RequestError(AuthClientError):
    """Base class for failures of a single call.

    Attributes:
        status_code: HTTP status of the failure, None when no response arrived
        url: The resolved URL of the call
        error_message: The server-supplied errorMessage, when the body carried one
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        error_message: Optional[str] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
    ):
        self.status_code = status_code
        self.url = url
        self.error_message = error_message
        self.original_error = original_error
        context = ExceptionContext(
            error_code=error_code,
            context={"url": url, "status": status_code},
            technical_details=repr(original_error) if original_error else None,
        )
        super().__init__(message, context)

    @property
    def best_message(self) -> str:
        """The most specific message available for display."""
        return self.error_message or self.message


class ApiError(RequestError):
    """Raised when a 2xx response carries a ``success: false`` envelope.

    The status is always reported as 400, whatever the transport returned.
    """

    def __init__(self, error_message: str, url: Optional[str] = None):
        super().__init__(
            error_message,
            status_code=BUSINESS_FAILURE_STATUS,
            url=url,
            error_message=error_message,
            error_code="API_ERROR",
        )


class TransportError(RequestError):
    """Raised when the call failed without a usable response.

    Covers connection failures, timeouts and bodies that are not a valid envelope.
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            url=url,
            original_error=original_error,
            error_code="TRANSPORT_ERROR",
        )


class HttpStatusError(TransportError):
    """Raised when the server answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        url: Optional[str] = None,
        error_message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            f"Request failed with status code {status_code}",
            url=url,
            original_error=original_error,
            status_code=status_code,
        )
        self.error_message = error_message
        self.error_code = "HTTP_STATUS"


class RefreshTokenError(RequestError):
    """Raised when the access token could not be refreshed.

    Either no refresh token was stored, or the refresh call itself failed.
    """

    def __init__(
        self,
        message: str = "No refresh token available",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            original_error=original_error,
            error_code="REFRESH_FAILED",
        )
