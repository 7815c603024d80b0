# tests/test_logging_config.py
import logging

import pytest

from work_tracker_api.app.core.logging_config import UVICORN_LOGGERS, setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Root and uvicorn loggers with no handlers, restored afterwards."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    for name in UVICORN_LOGGERS:
        logger = logging.getLogger(name)
        monkeypatch.setattr(logger, "level", logger.level)
        monkeypatch.setattr(logger, "handlers", list(logger.handlers))
    yield root
    for handler in root.handlers:
        handler.close()


def test_log_file_parent_directories_are_created(bare_root, tmp_path):
    logfile = tmp_path / "logs" / "nested" / "tracker.log"
    setup_logging("debug", str(logfile))

    assert logfile.parent.is_dir()
    assert bare_root.level == logging.DEBUG
    assert any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)

    logging.getLogger("work_tracker_api.test").info("hello file")
    for handler in bare_root.handlers:
        handler.flush()
    assert "hello file" in logfile.read_text(encoding="utf-8")


def test_uvicorn_loggers_follow_level(bare_root):
    setup_logging("WARNING")
    for name in UVICORN_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)


def test_uvicorn_level_aligned_when_root_already_configured(bare_root):
    existing = logging.NullHandler()
    bare_root.addHandler(existing)
    setup_logging("ERROR")

    assert bare_root.handlers == [existing]
    assert logging.getLogger("uvicorn.access").level == logging.ERROR


def test_unknown_level_falls_back_to_info(bare_root):
    setup_logging("chatty")
    assert bare_root.level == logging.INFO
