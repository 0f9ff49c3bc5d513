"""Tests for httprollup logging helpers."""
import logging

import pytest

from httprollup.logging import create_logger, default_handler, has_level_handler, logger


@pytest.fixture
def reset_logger():
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    logger.setLevel(logging.NOTSET)
    logger.handlers.clear()
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate


class TestCreateLogger:
    def test_name(self, reset_logger):
        assert create_logger().name == "httprollup"

    def test_debug_sets_level(self, reset_logger):
        create_logger(debug=True)
        assert logger.level == logging.DEBUG

    def test_no_debug_leaves_level(self, reset_logger):
        create_logger()
        assert logger.level == logging.NOTSET

    def test_explicit_level_kept(self, reset_logger):
        logger.setLevel(logging.ERROR)
        create_logger(debug=True)
        assert logger.level == logging.ERROR

    def test_default_handler_added_without_other_handlers(self, reset_logger):
        logger.propagate = False
        create_logger()
        assert default_handler in logger.handlers

    def test_default_handler_added_once(self, reset_logger):
        logger.propagate = False
        create_logger()
        create_logger()
        assert logger.handlers.count(default_handler) == 1

    def test_default_handler_writes_to_stderr(self, reset_logger, capsys):
        logger.propagate = False
        create_logger().warning("rolled up")
        assert "WARNING in test_logging: rolled up" in capsys.readouterr().err


class TestHasLevelHandler:
    def test_own_handler(self, reset_logger):
        logger.propagate = False
        logger.addHandler(logging.NullHandler())
        assert has_level_handler(logger)

    def test_no_handlers(self, reset_logger):
        logger.propagate = False
        assert not has_level_handler(logger)

    def test_handler_level_too_high(self, reset_logger):
        logger.propagate = False
        logger.setLevel(logging.DEBUG)
        handler = logging.NullHandler()
        handler.setLevel(logging.ERROR)
        logger.addHandler(handler)
        assert not has_level_handler(logger)
