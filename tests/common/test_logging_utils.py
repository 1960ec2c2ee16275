"""
Unit tests for queue-based log forwarding.
"""

import logging
from queue import Queue

import pytest

from poster_toolkit.common.logging_utils import (
    ROOT_LOGGER_NAME,
    QueueLogHandler,
    attach_queue_handler,
    detach_queue_handler,
    drain_queue,
)


@pytest.fixture
def restore_logger_level():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    original = logger.level
    yield logger
    logger.setLevel(original)


def test_handler_when_debug_record_then_reported_as_info():
    # Arrange
    q = Queue()
    handler = QueueLogHandler(q, level=logging.DEBUG)
    record = logging.LogRecord("x", logging.DEBUG, __file__, 1, "detail", None, None)

    # Act
    handler.emit(record)

    # Assert
    assert drain_queue(q) == [("detail", "INFO")]


def test_attach_when_pipeline_logs_then_messages_queued(restore_logger_level):
    # Arrange
    q = Queue()
    handler = attach_queue_handler(q)

    # Act
    try:
        logging.getLogger(f"{ROOT_LOGGER_NAME}.tiling.partitioner").info("Partitioned")
        logging.getLogger(f"{ROOT_LOGGER_NAME}.controller").warning("Low resolution")
    finally:
        detach_queue_handler(handler)

    # Assert
    assert drain_queue(q) == [("Partitioned", "INFO"), ("Low resolution", "WARNING")]


def test_detach_when_removed_then_no_more_messages(restore_logger_level):
    q = Queue()
    handler = attach_queue_handler(q)
    detach_queue_handler(handler)

    logging.getLogger(ROOT_LOGGER_NAME).error("after detach")

    assert drain_queue(q) == []


def test_attach_when_level_warning_then_info_filtered(restore_logger_level):
    q = Queue()
    handler = attach_queue_handler(q, level=logging.WARNING)
    try:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.info("quiet")
        logger.error("loud")
    finally:
        detach_queue_handler(handler)

    assert drain_queue(q) == [("loud", "ERROR")]


def test_drain_queue_when_empty_then_returns_empty_list():
    assert drain_queue(Queue()) == []
