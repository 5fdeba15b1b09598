"""
Centralized error handling for the CLI.

Turns authclient exceptions into a short styled message and exit code 1.
"""

import sys
from functools import wraps

from pydantic import ValidationError
from rich.console import Console

from ..exceptions import (
    ApiError,
    AuthClientError,
    ConfigurationError,
    RefreshTokenError,
    RequestError,
)
from ..logging import get_logger

console = Console(stderr=True)
logger = get_logger("authclient.cli")


def handle_cli_errors(func):
    """Decorator to handle all CLI errors with proper formatting and exit codes."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            _print_error("Operation cancelled by user", "yellow")
            sys.exit(1)
        except ValidationError as e:
            _handle_configuration_error(
                ConfigurationError(f"Invalid settings: {e.error_count()} error(s)\n{e}")
            )
        except ConfigurationError as e:
            _handle_configuration_error(e)
        except RefreshTokenError as e:
            _print_error(f"🔐 Session expired: {e.message}")
            _print_help("Store fresh tokens with: authclient tokens set")
            _exit_with(e)
        except ApiError as e:
            _print_error(f"Request rejected ({e.status_code}): {e.message}")
            _exit_with(e)
        except RequestError as e:
            _print_error(f"Request failed: {e.best_message}")
            _exit_with(e)
        except AuthClientError as e:
            _print_error(f"Error: {e.message}")
            _exit_with(e)

    return wrapper


def _print_error(message: str, style: str = "red"):
    console.print(message, style=style, markup=False, highlight=False)


def _print_help(message: str):
    console.print(f"💡 {message}", style="blue", markup=False, highlight=False)


def _handle_configuration_error(e: ConfigurationError):
    _print_error(f"⚙ Configuration Error: {e.message}")
    if e.help_text:
        _print_help(e.help_text)
    _exit_with(e)


def _exit_with(e: AuthClientError):
    console.print(f"🔍 Error ID: {e.correlation_id}", style="dim", markup=False)
    logger.error(f"CLI command failed: {e.message}", **e.to_dict())
    sys.exit(1)
