"""Tests for rtplan logging setup."""
import logging

import pytest
from rich.logging import RichHandler

from rtplan.core import logger as rtlogger
from rtplan.core.logger import get_logger, set_verbose, setup_file_logging


@pytest.fixture(autouse=True)
def _reset_level():
    yield
    set_verbose(False)


def test_get_logger_attaches_one_rich_handler():
    log = get_logger("rtplan.tests.handlers")
    get_logger("rtplan.tests.handlers")

    assert sum(isinstance(h, RichHandler) for h in log.handlers) == 1
    assert log.level == logging.INFO


def test_rich_handler_writes_to_stderr():
    handler = next(h for h in get_logger("rtplan.tests.stream").handlers if isinstance(h, RichHandler))
    assert handler.console.stderr is True


def test_set_verbose_updates_existing_loggers():
    log = get_logger("rtplan.tests.existing")

    set_verbose(True)
    assert log.level == logging.DEBUG
    assert logging.getLogger("rtplan").level == logging.DEBUG

    set_verbose(False)
    assert log.level == logging.INFO


def test_set_verbose_applies_to_new_loggers():
    set_verbose(True)
    assert get_logger("rtplan.tests.created_after").level == logging.DEBUG


def test_set_verbose_leaves_other_loggers_alone():
    other = logging.getLogger("someone.else")
    other.setLevel(logging.ERROR)

    set_verbose(True)

    assert other.level == logging.ERROR


def test_setup_file_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(rtlogger, "_file_logging_configured", False)
    log_file = tmp_path / "logs" / "rtplan.log"
    root = logging.getLogger("rtplan")
    before = list(root.handlers)

    set_verbose(True)
    try:
        used = setup_file_logging(log_file=str(log_file), verbose=True)
        added = [h for h in root.handlers if h not in before]

        assert used == log_file
        assert len(added) == 1
        assert isinstance(added[0], logging.FileHandler)
        assert added[0].level == logging.DEBUG
        assert log_file.exists()
        assert "rtplan logging initialized" in log_file.read_text()
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()


def test_setup_file_logging_runs_once(tmp_path, monkeypatch):
    monkeypatch.setattr(rtlogger, "_file_logging_configured", True)
    root = logging.getLogger("rtplan")
    before = list(root.handlers)

    assert setup_file_logging(log_file=str(tmp_path / "rtplan.log")) is None
    assert root.handlers == before
    assert not (tmp_path / "rtplan.log").exists()


def test_setup_file_logging_falls_back(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    fallback = tmp_path / "fallback.log"
    monkeypatch.setattr(rtlogger, "_file_logging_configured", False)
    monkeypatch.setattr(rtlogger, "FALLBACK_LOG_FILE", fallback)
    root = logging.getLogger("rtplan")
    before = list(root.handlers)

    try:
        used = setup_file_logging(log_file=str(blocker / "rtplan.log"))

        assert used == fallback
        assert fallback.exists()
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
