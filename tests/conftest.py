"""
Shared pytest fixtures for calculator tests.

This module provides:
- Settings isolated from CALC_* environment variables and .env files
- A factory for read-loop sessions bound to in-memory streams
- Root logger restoration after tests that call setup_logging()
"""

import io
import logging
import os

import pytest

from calc.core.config import Settings, get_settings
from calc.repl import Session


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Drop CALC_* variables and the cached settings around every test."""
    for name in list(os.environ):
        if name.startswith("CALC_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def make_session(settings):
    """Factory for sessions reading from a string and writing to buffers."""
    def _factory(text: str, prompt: bool = False, **overrides) -> Session:
        session_settings = settings.model_copy(update=overrides) if overrides else settings
        return Session(
            session_settings,
            stdin=io.StringIO(text),
            stdout=io.StringIO(),
            stderr=io.StringIO(),
            prompt=prompt,
        )
    return _factory


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
