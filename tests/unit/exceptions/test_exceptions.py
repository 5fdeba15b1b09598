"""
Unit tests for the authclient exception hierarchy.
"""

import pytest

from authclient.exceptions import (
    ApiError,
    AuthClientError,
    ConfigurationError,
    HttpStatusError,
    InvalidConfigurationError,
    MissingConfigurationError,
    RefreshTokenError,
    RequestError,
    TransportError,
    UninitializedClientError,
)
from authclient.exceptions.base import ExceptionContext


@pytest.mark.unit
class TestAuthClientError:
    """Test the base AuthClientError class."""

    def test_basic_error_creation(self):
        error = AuthClientError("Something broke")

        assert error.message == "Something broke"
        assert str(error) == "Something broke"
        assert error.help_text is None
        assert error.error_code is None
        assert len(error.correlation_id) == 8

    def test_error_with_context(self):
        error = AuthClientError(
            "Something broke",
            ExceptionContext(help_text="Try again", error_code="E1", context={"url": "/x"}),
        )

        assert error.error_code == "E1"
        assert str(error) == "Something broke (help: Try again) [url: /x]"

    def test_none_context_values_are_not_shown(self):
        error = AuthClientError("Oops", ExceptionContext(context={"url": None}))

        assert str(error) == "Oops"

    def test_add_context_returns_self(self):
        error = AuthClientError("Oops")

        assert error.add_context(attempt=2) is error
        assert error.context == {"attempt": 2}

    def test_to_dict(self):
        error = AuthClientError("Oops", ExceptionContext(error_code="E2"))

        data = error.to_dict()
        assert data["error_type"] == "AuthClientError"
        assert data["message"] == "Oops"
        assert data["error_code"] == "E2"
        assert data["correlation_id"] == error.correlation_id

    def test_correlation_ids_are_unique(self):
        assert AuthClientError("a").correlation_id != AuthClientError("b").correlation_id


@pytest.mark.unit
class TestConfigurationErrors:

    def test_missing_configuration(self):
        error = MissingConfigurationError("base_url")

        assert isinstance(error, ConfigurationError)
        assert error.field == "base_url"
        assert "base_url" in error.message
        assert error.error_code == "CONFIG_MISSING"
        assert "AUTHCLIENT_" in error.help_text

    def test_invalid_configuration(self):
        error = InvalidConfigurationError("timeout", -1, "a positive number of seconds")

        assert error.value == -1
        assert "got -1" in error.message
        assert error.error_code == "CONFIG_INVALID"

    def test_uninitialized_client(self):
        error = UninitializedClientError()

        assert error.message == "Request client not initialized. Call configure() first."


@pytest.mark.unit
class TestRequestErrors:

    def test_api_error_is_always_400(self):
        error = ApiError("Insufficient balance", url="/pay")

        assert isinstance(error, RequestError)
        assert error.status_code == 400
        assert error.best_message == "Insufficient balance"

    def test_http_status_error_prefers_server_message(self):
        error = HttpStatusError(404, url="/x", error_message="User not found")

        assert isinstance(error, TransportError)
        assert error.message == "Request failed with status code 404"
        assert error.best_message == "User not found"
        assert error.error_code == "HTTP_STATUS"

    def test_http_status_error_without_server_message(self):
        error = HttpStatusError(503)

        assert error.best_message == "Request failed with status code 503"

    def test_transport_error_has_no_status(self):
        original = ConnectionError("refused")
        error = TransportError("Network Error", url="/x", original_error=original)

        assert error.status_code is None
        assert error.original_error is original
        assert "refused" in error.technical_details

    def test_refresh_token_error_default_message(self):
        error = RefreshTokenError()

        assert error.message == "No refresh token available"
        assert error.error_code == "REFRESH_FAILED"
        assert not isinstance(error, TransportError)
