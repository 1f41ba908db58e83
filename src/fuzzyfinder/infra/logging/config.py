from __future__ import annotations

"""
Logging Settings.

The finder is a short-lived command, so by default it reports on stderr only
and keeps stdout free for results. A rotating log file is opt-in.
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

# Rotation for the optional log file
_LOG_FILE_MAX_BYTES: int = 1024 * 1024
_LOG_FILE_BACKUPS: int = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging.

    Attributes:
        level: Level name; unknown names fall back to INFO.
        console: Whether records go to stderr.
        log_file: Path of the rotating log file, or None for no file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = _LOG_FILE_MAX_BYTES
    backup_count: int = _LOG_FILE_BACKUPS

    console_fmt: str = "fuzzyfinder: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, *, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """Settings for one command-line run: warnings only unless debugging."""
        return cls(level="DEBUG" if debug else "WARNING", console=True, log_file=log_file)
