"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers
from datetime import date
from unittest.mock import patch

import pytest

from taskplanner.config import AppConfig
from taskplanner.models import Deadline, FixedClock


def _drop_handlers():
    logger = logging.getLogger("taskplanner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()


@pytest.fixture(autouse=True)
def reset_logger():
    """Reset the logger singleton and logging state between tests."""
    import taskplanner.utils.logger as logger_mod

    original = logger_mod._logger
    logger_mod._logger = None
    _drop_handlers()

    yield

    logger_mod._logger = None
    _drop_handlers()
    logger_mod._logger = original


def test_get_logger_creates_log_file(tmp_path):
    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from taskplanner.utils.logger import get_logger

        logger = get_logger()

    assert (tmp_path / "taskplanner.log").exists()
    assert isinstance(logger, logging.Logger)
    assert logger.name == "taskplanner"


def test_get_logger_returns_singleton(tmp_path):
    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from taskplanner.utils.logger import get_logger

        assert get_logger() is get_logger()


def test_get_logger_uses_configured_level(tmp_path):
    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from taskplanner.utils.logger import get_logger

        logger = get_logger(AppConfig(log_level="warning"))

    assert logger.level == logging.WARNING


def test_model_records_reach_log_file(tmp_path):
    """Records from model modules propagate to the application logger."""
    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from taskplanner.utils.logger import get_logger

        logger = get_logger()

    Deadline.is_valid_deadline("27/05/2021", FixedClock(date(2021, 5, 26)))

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "taskplanner.log").read_text()
    assert "Checking for valid deadline '27/05/2021'" in content
    assert "[taskplanner.models.deadline]" in content


def test_get_logger_creates_parent_dirs(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(nested)):
        from taskplanner.utils.logger import get_logger

        get_logger()

    assert nested.is_dir()


def test_file_handler_added_next_to_existing_handlers(tmp_path):
    existing = logging.NullHandler()
    logging.getLogger("taskplanner").addHandler(existing)

    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from taskplanner.utils.logger import get_logger

        logger = get_logger()

    assert existing in logger.handlers
    file_handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1


def test_existing_file_handler_is_not_duplicated(tmp_path):
    import taskplanner.utils.logger as logger_mod

    with patch("taskplanner.utils.logger.user_log_dir", return_value=str(tmp_path)):
        first = logger_mod.get_logger()
        logger_mod._logger = None
        second = logger_mod.get_logger()

    assert first is second
    file_handlers = [
        h for h in second.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
