"""Tests for logging configuration."""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from termin_watch.logging_config import LOGGING_CONFIG, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_json_default():
    configure_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_logging_text_and_level():
    configure_logging("debug", "text")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_logging_does_not_mutate_base_config():
    configure_logging("DEBUG", "text")
    assert LOGGING_CONFIG["root"]["level"] == "WARNING"
    assert LOGGING_CONFIG["handlers"]["console"]["formatter"] == "json"


def test_configure_logging_unknown_level_raises():
    with pytest.raises(ValueError):
        configure_logging("verbose")
