from __future__ import annotations

"""
Logging Configuration Models.

Logging settings derived from the CLI configuration: severity, whether
records go to stderr, and the optional rotating log file.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Level name; unknown or empty names mean INFO.
        console: Emit records on stderr.
        log_file: Path of a rotating log file, or None to log to stderr only.
        max_bytes: Size of the log file before it rolls over.
        backup_count: Number of rolled over files kept next to it.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "LoggingConfig":
        """Build the configuration from the 'log_level' and 'log_file' settings."""
        return cls(
            level=settings.get("log_level") or "INFO",
            log_file=settings.get("log_file") or None,
        )

    @property
    def level_number(self) -> int:
        """Numeric logging level."""
        return LEVELS.get(str(self.level or "").strip().upper(), logging.INFO)
