from __future__ import annotations

"""
Logging Core Orchestrator.

Idempotent bootstrap of the root logger. Records are pushed through a
QueueHandler and written by a QueueListener, so console and file output
happen off the calling thread.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from filetree_markup.infra.fs import get_user_data_dir
from filetree_markup.infra.logging.config import LoggingConfig
from filetree_markup.infra.logging.handlers import _build_handlers, _is_our_handler, _tag_handler

_CONFIGURED_FLAG_ATTR: str = "_filetree_markup_configured"
_QUEUE_LISTENER_ATTR: str = "_filetree_markup_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "filetree_markup.log") -> str:
    """Return the log file location inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, unless force is set.

    Args:
        cfg: Logging settings.
        force: Re-create handlers even if logging was already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    root.setLevel(cfg.level_number)

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    handlers_list = _build_handlers(cfg)
    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_safe_stop_listener, listener)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one whose thread was already joined."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
