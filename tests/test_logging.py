"""Logging setup: stdlib and uvicorn records end up in loguru."""

import logging
import sys

import pytest
from loguru import logger

from src.lib.logging_setup import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logger.remove()
    logger.add(sys.stderr)


def test_uvicorn_records_reach_loguru(restore_logging):
    setup_logging("DEBUG")
    messages = []
    logger.add(messages.append, format="{message}")

    logging.getLogger("uvicorn").info("Uvicorn running on port 3333")

    assert any("Uvicorn running on port 3333" in message for message in messages)


def test_uvicorn_handlers_are_replaced(restore_logging):
    setup_logging("info")

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        assert uvicorn_logger.handlers == []
        assert uvicorn_logger.propagate
