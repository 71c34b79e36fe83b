from __future__ import annotations

"""
Logging Handlers.

Builds the stderr and log file handlers described by a LoggingConfig and
tags them, so reconfiguration only replaces handlers installed here.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List

from filetree_markup.infra.fs import ensure_parent_dir
from filetree_markup.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_filetree_markup_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the output handlers requested by the configuration.

    A log file that cannot be opened is reported on stderr and skipped; the
    transformation itself never depends on logging.

    Returns:
        List[logging.Handler]: Tagged handlers, possibly empty.
    """
    handlers: List[logging.Handler] = []
    level = cfg.level_number

    if cfg.console:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter(cfg.console_fmt))
        handlers.append(stream)

    if cfg.log_file:
        try:
            ensure_parent_dir(cfg.log_file)
            file_handler = RotatingFileHandler(
                cfg.log_file,
                maxBytes=cfg.max_bytes,
                backupCount=cfg.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        else:
            file_handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
            handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        _tag_handler(handler)
    return handlers
