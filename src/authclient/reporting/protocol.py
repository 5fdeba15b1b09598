"""
Error reporter protocol.

The request client hands human-readable failure messages to an ErrorHandler.
Only ``show_error`` is required; ``show_warning`` and ``show_info`` may be
provided by richer reporters.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ErrorHandler(Protocol):
    """Surfaces a failure message to the user."""

    def show_error(self, message: str) -> None:
        ...


def show_warning(handler: Any, message: str) -> None:
    """Call ``handler.show_warning`` if the handler provides one."""
    method = getattr(handler, "show_warning", None)
    if callable(method):
        method(message)


def show_info(handler: Any, message: str) -> None:
    """Call ``handler.show_info`` if the handler provides one."""
    method = getattr(handler, "show_info", None)
    if callable(method):
        method(message)
