"""
Centralized logging configuration and management.

Provides the LoggingManager singleton for configuring and managing loggers.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import LoggingConfig
from .formatters import (
    BearerRedactionFilter,
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)
from .loggers import AuthClientLogger

ROOT_LOGGER_NAME = "authclient"

# Third-party loggers that echo full request lines, headers included
NOISY_LOGGERS = ("urllib3", "requests")


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers = []
            self._initialized = True

    def configure(self, config: LoggingConfig):
        """Configure the authclient logger tree.

        Handlers are attached to the ``authclient`` logger rather than the root
        logger so that an embedding application keeps control of its own output.
        """
        self.config = config

        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in self.handlers:
            package_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        package_logger.setLevel(config.level)
        package_logger.propagate = False

        for output in config.output:
            if output == "console":
                self._add_console_handler(config)
            elif output == "file":
                self._add_file_handler(config)

        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(config.level, logging.WARNING))

    def _add_console_handler(self, config: LoggingConfig):
        if config.format_type == "rich":
            handler = create_rich_handler()
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif config.format_type == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())

        self._attach(handler, config)

    def _add_file_handler(self, config: LoggingConfig):
        """Add file handler with rotation."""
        if not config.file_path:
            config.file_path = Path("logs/authclient.log")

        config.file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )

        if config.format_type == "json":
            handler.setFormatter(
                StructuredFormatter(config.service_name, config.version)
            )
        else:
            handler.setFormatter(create_console_formatter())

        self._attach(handler, config)

    def _attach(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(config.level)
        handler.addFilter(BearerRedactionFilter())
        logging.getLogger(ROOT_LOGGER_NAME).addHandler(handler)
        self.handlers.append(handler)

    def get_logger(
        self, name: str, correlation_id: Optional[str] = None
    ) -> AuthClientLogger:
        """Get an authclient logger instance."""
        return AuthClientLogger(name, correlation_id)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
