from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
log file output.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from filetree_markup.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from filetree_markup.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from filetree_markup.infra.logging.handlers import _is_our_handler


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if _is_our_handler(h):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if _is_our_handler(h)]


def test_logging_idempotency() -> None:
    """Repeated configuration must not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == initial == 1


def test_force_reconfigures(tmp_path: Path) -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    (handler,) = _our_handlers()
    assert isinstance(handler, QueueHandler)
    assert isinstance(getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR), QueueListener)


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "filetree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("filetree_markup.test").info("tree processed")

    # Give the QueueListener time to write
    time.sleep(0.3)
    assert log_file.exists()
    assert "tree processed" in log_file.read_text(encoding="utf-8")


def test_no_handlers_leaves_root_unconfigured() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []


@pytest.mark.parametrize(
    "level, expected",
    [("debug", logging.DEBUG), (" WARN ", logging.WARNING), ("", logging.INFO), ("bogus", logging.INFO)],
)
def test_level_number(level: str, expected: int) -> None:
    assert LoggingConfig(level=level).level_number == expected


def test_default_log_path() -> None:
    assert get_default_log_path().endswith("filetree_markup.log")


def test_log_file_rolls_over(tmp_path: Path) -> None:
    log_file = tmp_path / "filetree.log"
    configure_logging(
        LoggingConfig(level="INFO", console=False, log_file=str(log_file), max_bytes=200, backup_count=1)
    )

    for i in range(20):
        logging.getLogger("filetree_markup.test").info(f"record {i:02d} " + "x" * 40)

    time.sleep(0.3)
    assert (tmp_path / "filetree.log.1").exists()
    assert not (tmp_path / "filetree.log.2").exists()


def test_unopenable_log_file_falls_back_to_console(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    configure_logging(LoggingConfig(console=True, log_file=str(blocker / "run.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert len(_our_handlers()) == 1
