"""
Tests for the built-in error reporters.
"""

import io
import logging
from unittest.mock import Mock

from rich.console import Console

from authclient.reporting import (
    CallbackErrorHandler,
    ConsoleErrorHandler,
    ErrorHandler,
    LoggingErrorHandler,
    show_info,
    show_warning,
)


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=120), buffer


class TestConsoleErrorHandler:

    def test_show_error(self):
        console, buffer = make_console()

        ConsoleErrorHandler(console=console).show_error("User not found")

        assert buffer.getvalue().strip() == "✗ User not found"

    def test_markup_is_not_interpreted(self):
        console, buffer = make_console()

        ConsoleErrorHandler(console=console).show_warning("[bold]careful[/bold]")

        assert "[bold]careful[/bold]" in buffer.getvalue()

    def test_quiet_prints_nothing(self):
        console, buffer = make_console()

        handler = ConsoleErrorHandler(console=console, quiet=True)
        handler.show_error("boom")
        handler.show_info("fyi")

        assert buffer.getvalue() == ""

    def test_satisfies_protocol(self):
        assert isinstance(ConsoleErrorHandler(), ErrorHandler)


class TestLoggingErrorHandler:

    def test_logs_at_matching_levels(self, caplog):
        handler = LoggingErrorHandler("authclient.reporting.test")

        with caplog.at_level(logging.INFO, logger="authclient.reporting.test"):
            handler.show_error("boom")
            handler.show_warning("hmm")
            handler.show_info("fyi")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.ERROR, "boom"),
            (logging.WARNING, "hmm"),
            (logging.INFO, "fyi"),
        ]


class TestCallbackErrorHandler:

    def test_error_callback(self):
        on_error = Mock()

        CallbackErrorHandler(on_error).show_error("boom")

        on_error.assert_called_once_with("boom")

    def test_optional_callbacks_may_be_missing(self):
        handler = CallbackErrorHandler(Mock())

        handler.show_warning("hmm")
        handler.show_info("fyi")

    def test_optional_callbacks(self):
        on_warning, on_info = Mock(), Mock()
        handler = CallbackErrorHandler(Mock(), on_warning=on_warning, on_info=on_info)

        handler.show_warning("hmm")
        handler.show_info("fyi")

        on_warning.assert_called_once_with("hmm")
        on_info.assert_called_once_with("fyi")


class TestOptionalSeverities:

    def test_calls_method_when_present(self, reporter):
        show_warning(reporter, "hmm")
        show_info(reporter, "fyi")

        reporter.show_warning.assert_called_once_with("hmm")
        reporter.show_info.assert_called_once_with("fyi")

    def test_skips_handlers_with_only_show_error(self):
        handler = Mock(spec=["show_error"])

        show_warning(handler, "hmm")
        show_info(handler, "fyi")

        handler.show_error.assert_not_called()
