"""
Error reporting for authclient.

The request pipeline reports failures to a pluggable ErrorHandler.
"""

from .handlers import CallbackErrorHandler, ConsoleErrorHandler, LoggingErrorHandler
from .protocol import ErrorHandler, show_info, show_warning

__all__ = [
    "ErrorHandler",
    "LoggingErrorHandler",
    "ConsoleErrorHandler",
    "CallbackErrorHandler",
    "show_warning",
    "show_info",
]
