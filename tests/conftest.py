"""Shared fixtures for mitt tests."""

import pytest

from mitt.config.logging import reset_logging
from mitt.config.settings import get_settings
from mitt.emitter import Emitter


@pytest.fixture(autouse=True)
def _isolate_config():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    reset_logging()


@pytest.fixture
def emitter() -> Emitter:
    return Emitter()


@pytest.fixture
def calls() -> list:
    """Records handler invocations as ``(name, args)`` tuples."""
    return []


@pytest.fixture
def recorder(calls):
    def make(name: str):
        def handler(*args):
            calls.append((name, args))

        return handler

    return make
