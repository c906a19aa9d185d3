from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a QueueHandler and drained by a QueueListener thread so
that file I/O never happens inline with tree generation.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fixtree.infra.logging.config import (
    _LEVEL_MAP,
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LOG_FILE_BACKUPS,
    LOG_FILE_MAX_BYTES,
    LoggingConfig,
)
from fixtree.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state flags for idempotency and lifecycle tracking
_CONFIGURED_FLAG_ATTR: str = "_fixtree_configured"
_QUEUE_LISTENER_ATTR: str = "_fixtree_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger idempotently using a queue-based pipeline.

    Repeated calls are no-ops unless 'force' is set, in which case our
    previously installed handlers are detached and replaced.

    Args:
        cfg: Structural configuration for the logging system.
        force: Re-initialize handlers even if already configured.

    Returns:
        logging.Logger: The configured root logger.
    """
    root = logging.getLogger()

    already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _remove_our_handlers(root)
    _stop_existing_listener(root)

    console_formatter = logging.Formatter(CONSOLE_FORMAT)
    file_formatter = logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT)

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(console_formatter)
        _tag_handler(sh)
        handlers_list.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            file_formatter,
            LOG_FILE_MAX_BYTES,
            LOG_FILE_BACKUPS,
        )
        if fh:
            handlers_list.append(fh)

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
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Drain the queue and detach every handler installed by configure_logging.

    Used by the CLI before returning so that all records reach their
    handlers, and by tests to reset global state.
    """
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every internally-managed handler of the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate and release the existing QueueListener."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating double-stop calls.

    QueueListener.stop() fails once its thread has been joined, which
    happens when atexit runs after an explicit shutdown.
    """
    if not listener:
        return

    if getattr(listener, "_thread", None) is not None:
        listener.stop()
