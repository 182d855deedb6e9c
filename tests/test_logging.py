"""Tests for logging configuration."""

import logging

import pytest

from haikuforge import SyllableIndex, _logging, configure_logging


def _own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, _logging._HANDLER_FLAG, False)]


@pytest.fixture(autouse=True)
def reset_logging():
    logger = logging.getLogger("haikuforge")
    level = logger.level
    yield
    for handler in _own_handlers(logger):
        logger.removeHandler(handler)
    logger.setLevel(level)


def test_explicit_level():
    logger = configure_logging("debug")
    assert logger.name == "haikuforge"
    assert logger.level == logging.DEBUG
    assert len(_own_handlers(logger)) == 1


def test_env_level(monkeypatch):
    monkeypatch.setenv("HAIKUFORGE_LOG_LEVEL", "WARNING")
    assert configure_logging().level == logging.WARNING


def test_root_logger_untouched():
    root_handlers = list(logging.getLogger().handlers)
    configure_logging("info")
    assert logging.getLogger().handlers == root_handlers


def test_level_parsing():
    assert _logging._level("10") == logging.DEBUG
    assert _logging._level(logging.ERROR) == logging.ERROR
    assert _logging._level(" warning ") == logging.WARNING
    assert _logging._level("chatty") == logging.INFO
    assert _logging._level(None) == logging.INFO


def test_idempotent_unless_forced():
    logger = configure_logging("error")
    configure_logging("debug")
    assert logger.level == logging.ERROR
    assert len(_own_handlers(logger)) == 1

    configure_logging("debug", force=True)
    assert logger.level == logging.DEBUG
    assert len(_own_handlers(logger)) == 1


def test_index_build_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="haikuforge"):
        SyllableIndex.build(["moon", "xyzzy"], {"moon": 1}.get)
    assert "dropped 1 unknown" in caplog.text
