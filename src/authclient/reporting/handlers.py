"""
Built-in error reporters.
"""

from typing import Callable, Optional

from rich.console import Console

from ..logging import get_logger


class LoggingErrorHandler:
    """Report messages through the authclient logger."""

    def __init__(self, name: str = "authclient.reporting"):
        self.logger = get_logger(name)

    def show_error(self, message: str) -> None:
        self.logger.error(message)

    def show_warning(self, message: str) -> None:
        self.logger.warning(message)

    def show_info(self, message: str) -> None:
        self.logger.info(message)


class ConsoleErrorHandler:
    """Report messages on a Rich console, styled by severity."""

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        self.console = console or Console(stderr=True)
        self.quiet = quiet

    def _print(self, message: str, style: str) -> None:
        if self.quiet:
            return
        self.console.print(message, style=style, markup=False, highlight=False)

    def show_error(self, message: str) -> None:
        self._print(f"✗ {message}", "red bold")

    def show_warning(self, message: str) -> None:
        self._print(f"⚠ {message}", "yellow")

    def show_info(self, message: str) -> None:
        self._print(f"ℹ {message}", "blue")


class CallbackErrorHandler:
    """Adapt plain callables (for example a UI toast function) to the protocol."""

    def __init__(
        self,
        on_error: Callable[[str], None],
        on_warning: Optional[Callable[[str], None]] = None,
        on_info: Optional[Callable[[str], None]] = None,
    ):
        self._on_error = on_error
        self._on_warning = on_warning
        self._on_info = on_info

    def show_error(self, message: str) -> None:
        self._on_error(message)

    def show_warning(self, message: str) -> None:
        if self._on_warning:
            self._on_warning(message)

    def show_info(self, message: str) -> None:
        if self._on_info:
            self._on_info(message)
