"""Shared fixtures for rapidcheck tests."""

import logging

import pytest
import structlog

from rapidcheck.config import get_settings
from rapidcheck.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test applied."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def recorder():
    """Callable that records every value it receives."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, value):
            self.calls.append(value)
            return value

    return Recorder()
