"""
Logging utilities for forwarding pipeline logs to a UI shell.

The toolkit itself only logs through module-level loggers; a shell that
wants to show progress or failures as notifications attaches a queue
handler and drains the queue on its own schedule.
"""
from __future__ import annotations

import logging
from queue import Queue, Empty
from typing import List, Optional, Tuple

ROOT_LOGGER_NAME = "poster_toolkit"


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) tuples to a queue.

    Used to capture logs from the pipeline and display them in a UI.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            # Notifications only distinguish info/warning/error
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = ROOT_LOGGER_NAME,
    level: int = logging.INFO,
) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger.

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.
        level: Minimum level forwarded.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level=level)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


def detach_queue_handler(
    handler: QueueLogHandler,
    logger_name: Optional[str] = ROOT_LOGGER_NAME,
) -> None:
    """
    Remove a QueueLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)


def drain_queue(log_queue: Queue) -> List[Tuple[str, str]]:
    """Return every message currently queued, without blocking."""
    messages: List[Tuple[str, str]] = []
    while True:
        try:
            messages.append(log_queue.get_nowait())
        except Empty:
            return messages
