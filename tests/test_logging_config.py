"""Tests for ``setup_logging``."""

import logging
import uuid

import pytest

from todo_api.app.core.logging_config import setup_logging


@pytest.fixture
def fresh_logger():
    logger = logging.getLogger(f"todo_api.tests.{uuid.uuid4().hex}")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_writes_formatted_records_to_log_file(fresh_logger, tmp_path):
    logfile = tmp_path / "logs" / "todo.log"

    configured = setup_logging("debug", str(logfile), fmt="%(levelname)s|%(message)s", logger=fresh_logger)
    fresh_logger.debug("Created ToDo %s", 1)
    for handler in fresh_logger.handlers:
        handler.flush()

    assert configured is True
    assert fresh_logger.level == logging.DEBUG
    assert len(fresh_logger.handlers) == 2
    assert logfile.read_text(encoding="utf-8").splitlines() == ["DEBUG|Created ToDo 1"]


def test_console_only_without_log_file(fresh_logger):
    setup_logging("warning", logger=fresh_logger)

    assert fresh_logger.level == logging.WARNING
    assert [type(h) for h in fresh_logger.handlers] == [logging.StreamHandler]


def test_unknown_level_falls_back_to_info(fresh_logger):
    setup_logging("chatty", logger=fresh_logger)
    assert fresh_logger.level == logging.INFO


def test_configures_only_once(fresh_logger, tmp_path):
    assert setup_logging("INFO", logger=fresh_logger) is True
    assert setup_logging("DEBUG", str(tmp_path / "second.log"), logger=fresh_logger) is False

    assert len(fresh_logger.handlers) == 1
    assert fresh_logger.level == logging.INFO
    assert not (tmp_path / "second.log").exists()
