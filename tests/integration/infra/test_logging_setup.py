from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
file output.
"""

import logging
from pathlib import Path

import pytest

from fixtree.infra.logging import (
    LoggingConfig,
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up our root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."
    assert getattr(root, _CONFIGURED_FLAG_ATTR) is True


def test_force_reconfigures_without_leaking() -> None:
    cfg = LoggingConfig(level="INFO", console=True)
    configure_logging(cfg)
    configure_logging(cfg, force=True)

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert len(ours) == 1


def test_file_output_after_shutdown(tmp_path: Path) -> None:
    """TC-02: Records reach the log file once the queue is drained."""
    log_file = tmp_path / "logs" / "fixtree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("fixtree.test").debug("materialized something")
    shutdown_logging()

    assert "materialized something" in log_file.read_text(encoding="utf-8")
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR, None) is None


def test_no_handlers_configured() -> None:
    root = configure_logging(LoggingConfig(console=False, log_file=None))
    assert not any(getattr(h, _HANDLER_TAG_ATTR, False) for h in root.handlers)


def test_cli_settings_follow_flags(tmp_path: Path) -> None:
    assert LoggingConfig.for_cli(debug=True).level == "DEBUG"
    quiet = LoggingConfig.for_cli(debug=False, log_file=str(tmp_path / "run.log"))
    assert quiet.level == "WARNING"
    assert quiet.log_file == str(tmp_path / "run.log")
