"""Tests for logging setup."""
from __future__ import annotations

import logging

from burstfx import setup_logging


def test_setup_logging_configures_package_logger(tmp_path):
    log_file = tmp_path / "burst.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "burstfx"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("burstfx.loop").debug("hello from the loop")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the loop" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_does_not_stack_handlers():
    logger = setup_logging()
    setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
