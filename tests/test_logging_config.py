"""Tests for logging configuration"""

import logging

from jobwire.utils.logging_config import configure_logging, get_logger


def test_get_logger_uses_module_name():
    assert get_logger("jobwire.encoder").name == "jobwire.encoder"


def test_log_level_from_environment(monkeypatch):
    """Test that JOBWIRE_LOG_LEVEL sets the root level."""

    root = logging.getLogger()
    original_level = root.level
    original_handlers = list(root.handlers)
    root.handlers = []

    try:
        monkeypatch.setenv("JOBWIRE_LOG_LEVEL", "debug")
        configure_logging()
        assert root.level == logging.DEBUG
    finally:
        root.handlers = original_handlers
        root.setLevel(original_level)


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    root = logging.getLogger()
    original_level = root.level
    original_handlers = list(root.handlers)
    root.handlers = []

    try:
        monkeypatch.setenv("JOBWIRE_LOG_LEVEL", "chatty")
        configure_logging()
        assert root.level == logging.WARNING
    finally:
        root.handlers = original_handlers
        root.setLevel(original_level)
