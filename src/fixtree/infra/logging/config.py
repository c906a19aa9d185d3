from __future__ import annotations

"""
Logging Configuration Models.

Severity mapping, record formats and the settings the CLI passes to
configure_logging.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Console lines stay short; the log file keeps the origin of each record
CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings of one CLI run.

    Attributes:
        level: Minimum severity captured ("WARNING" unless --debug).
        console: Emit records on stderr.
        log_file: Rotating log file requested with --log-file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings matching the --debug and --log-file flags."""
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=log_file)
