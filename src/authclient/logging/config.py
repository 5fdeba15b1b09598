"""
Logging configuration for authclient.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

VALID_FORMATS = ("console", "json", "rich")
VALID_OUTPUTS = ("console", "file")


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.WARNING,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file"
        file_path: Optional[Path] = None,
        max_file_size: int = 5 * 1024 * 1024,  # 5MB
        backup_count: int = 3,
        service_name: str = "authclient",
        version: str = "unknown",
    ):
        self.level = (
            level if isinstance(level, int) else getattr(logging, level.upper())
        )
        if format_type not in VALID_FORMATS:
            raise ValueError(f"format_type must be one of: {', '.join(VALID_FORMATS)}")
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        for item in self.output:
            if item not in VALID_OUTPUTS:
                raise ValueError(f"output must contain only: {', '.join(VALID_OUTPUTS)}")
        self.file_path = file_path
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version
