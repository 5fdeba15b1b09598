"""
Pytest configuration and shared fixtures for authclient tests.
"""

import json
import logging
from unittest.mock import Mock

import pytest
import requests

from authclient.logging import logging_manager
from authclient.request import client as client_module
from authclient.tokens import MemoryTokenManager

BASE_URL = "https://api.example.com"

INVALID_JSON = object()


def make_response(status_code=200, body=None, url=BASE_URL):
    """Build a stand-in for requests.Response.

    Pass ``INVALID_JSON`` as ``body`` for a response whose ``.json()`` fails.
    """
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.url = url
    if body is INVALID_JSON:
        response.json.side_effect = ValueError("Expecting value")
        response.content = b"<html>oops</html>"
    else:
        response.json.return_value = body
        response.content = json.dumps(body).encode()
    return response


def envelope(data=None, success=True, error_message=None):
    body = {"success": success, "data": data}
    if error_message is not None:
        body["errorMessage"] = error_message
    return body


@pytest.fixture(autouse=True)
def reset_global_client():
    """Make sure no test leaks a process-wide client into the next one."""
    client_module.reset()
    yield
    client_module.reset()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any handlers configure_logging attached during a test."""
    yield
    package_logger = logging.getLogger("authclient")
    for handler in logging_manager.handlers:
        package_logger.removeHandler(handler)
        handler.close()
    logging_manager.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no AUTHCLIENT_* variables and no .env file in the cwd."""
    for name in (
        "AUTHCLIENT_BASE_URL",
        "AUTHCLIENT_TIMEOUT",
        "AUTHCLIENT_REFRESH_URL",
        "AUTHCLIENT_TOKEN_FILE",
        "AUTHCLIENT_LOG_LEVEL",
        "AUTHCLIENT_LOG_FORMAT",
        "AUTHCLIENT_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def session():
    """A requests.Session whose request() is driven by the test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def tokens():
    return MemoryTokenManager(token="A1", refresh_token="R1")


@pytest.fixture
def reporter():
    """An error handler recording every message it is shown."""
    return Mock(spec=["show_error", "show_warning", "show_info"])


@pytest.fixture
def respond():
    """Factory for fake responses, see make_response."""
    return make_response


@pytest.fixture
def body():
    """Factory for response envelopes."""
    return envelope


@pytest.fixture
def invalid_json():
    """Sentinel body for respond() producing a non-JSON response."""
    return INVALID_JSON
