"""
Tests for the process-wide configure()/request() façade.
"""

import logging
from unittest.mock import Mock

import pytest

import authclient
from authclient.core.config import ClientSettings
from authclient.exceptions import MissingConfigurationError, UninitializedClientError
from authclient.request import client as client_module
from authclient.request.types import Success
from authclient.tokens import FileTokenManager


class TestUninitialized:

    def test_request_before_configure(self):
        with pytest.raises(UninitializedClientError, match="Call configure\\(\\) first"):
            authclient.request(url="/x")

    def test_get_client_before_configure(self):
        with pytest.raises(UninitializedClientError):
            authclient.get_client()

    def test_request_after_reset(self, reporter):
        authclient.configure("https://api.example.com", error_handler=reporter)
        authclient.reset()

        with pytest.raises(UninitializedClientError):
            authclient.request(url="/x")


class TestConfigure:

    def test_configure_installs_client(self, reporter, tokens):
        client = authclient.configure(
            "https://api.example.com", error_handler=reporter, timeout=5, token_manager=tokens
        )

        assert authclient.get_client() is client
        assert client.timeout == 5
        assert client.token_manager is tokens

    def test_request_goes_through_configured_client(self, reporter, tokens, session, respond, body):
        session.request.return_value = respond(200, body({"ok": True}))
        authclient.configure(
            "https://api.example.com", error_handler=reporter, token_manager=tokens, session=session
        )

        assert authclient.request(url="/health") == Success({"ok": True})

    def test_reconfigure_replaces_and_closes_previous(self, reporter, session):
        first = authclient.configure("https://one.example.com", error_handler=reporter, session=session)
        second = authclient.configure("https://two.example.com", error_handler=reporter)

        assert authclient.get_client() is second
        assert second is not first
        session.close.assert_called_once()

    def test_failed_configure_keeps_previous_client(self, reporter):
        first = authclient.configure("https://one.example.com", error_handler=reporter)

        with pytest.raises(MissingConfigurationError):
            authclient.configure("https://two.example.com")

        assert authclient.get_client() is first


class TestConfigureFromSettings:

    def test_requires_base_url(self, clean_env, reporter):
        with pytest.raises(MissingConfigurationError, match="base_url"):
            client_module.configure_from_settings(reporter, ClientSettings())

    def test_builds_client_and_logging(self, clean_env, reporter, tmp_path):
        settings = ClientSettings(
            base_url="https://api.example.com",
            timeout=3,
            refresh_url="/token/refresh",
            token_file=tmp_path / "tokens.json",
            log_level="INFO",
        )

        client = authclient.configure_from_settings(reporter, settings)

        assert client.base_url == "https://api.example.com"
        assert client.timeout == 3
        assert isinstance(client.token_manager, FileTokenManager)
        assert client.token_manager.path == tmp_path / "tokens.json"
        assert logging.getLogger("authclient").level == logging.INFO

    def test_reads_environment_by_default(self, clean_env, monkeypatch, reporter):
        monkeypatch.setenv("AUTHCLIENT_BASE_URL", "https://env.example.com")

        client = authclient.configure_from_settings(reporter)

        assert client.base_url == "https://env.example.com"

    def test_custom_refresh_handler(self, clean_env, reporter, tokens):
        handler = Mock()
        settings = ClientSettings(base_url="https://api.example.com")

        client = authclient.configure_from_settings(
            reporter, settings, token_manager=tokens, refresh_handler=handler
        )

        assert client.refresh_handler is handler
        assert client.token_manager is tokens
