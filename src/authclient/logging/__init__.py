"""
authclient Logging Package

Structured logging with correlation IDs and configurable outputs:
- formatters: Log formatting (JSON, console, rich) and bearer redaction
- loggers: AuthClientLogger with correlation IDs
- config: Logging configuration
- manager: Centralized logging setup and management
"""

from .config import LoggingConfig
from .formatters import BearerRedactionFilter, StructuredFormatter
from .loggers import AuthClientLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "AuthClientLogger",
    "get_logger",
    "StructuredFormatter",
    "BearerRedactionFilter",
]
