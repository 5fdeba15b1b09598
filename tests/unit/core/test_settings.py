"""
Tests for ClientSettings.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from authclient.core.config import ClientSettings
from authclient.core.config.models import LogFormat, LogLevel


@pytest.mark.unit
class TestClientSettings:

    def test_defaults(self, clean_env):
        settings = ClientSettings()

        assert settings.base_url is None
        assert settings.timeout == 10.0
        assert settings.refresh_url == "/auth/refresh"
        assert settings.token_file == Path.home() / ".authclient" / "tokens.json"
        assert settings.log_level == LogLevel.WARNING
        assert settings.log_format == LogFormat.CONSOLE

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("AUTHCLIENT_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("AUTHCLIENT_TIMEOUT", "2.5")
        monkeypatch.setenv("AUTHCLIENT_LOG_LEVEL", "DEBUG")

        settings = ClientSettings()

        assert settings.base_url == "https://api.example.com"
        assert settings.timeout == 2.5
        assert settings.log_level == LogLevel.DEBUG

    def test_reads_dotenv_file(self, clean_env):
        (clean_env / ".env").write_text("AUTHCLIENT_REFRESH_URL=/token/refresh\n")

        assert ClientSettings().refresh_url == "/token/refresh"

    def test_blank_base_url_is_none(self, clean_env):
        assert ClientSettings(base_url="   ").base_url is None

    def test_base_url_must_be_http(self, clean_env):
        with pytest.raises(ValidationError, match="http"):
            ClientSettings(base_url="ftp://example.com")

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_timeout_bounds(self, clean_env, timeout):
        with pytest.raises(ValidationError):
            ClientSettings(timeout=timeout)

    def test_token_file_expands_user(self, clean_env):
        settings = ClientSettings(token_file="~/tokens.json")

        assert settings.token_file == Path.home() / "tokens.json"

    def test_to_logging_config(self, clean_env, tmp_path):
        settings = ClientSettings(log_level="INFO", log_format="json", log_file=tmp_path / "a.log")

        config = settings.to_logging_config()

        assert config.level == logging.INFO
        assert config.format_type == "json"
        assert config.output == ["console", "file"]
        assert config.file_path == tmp_path / "a.log"
