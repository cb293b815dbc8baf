"""Pytest configuration and shared fixtures for monad-maniac tests."""

import pytest

from monad_maniac import _config
from monad_maniac._logging import reset_logging


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test without init() state, env overrides or log handlers."""
    monkeypatch.delenv('MONAD_MANIAC_LOG_LEVEL', raising=False)
    monkeypatch.delenv('MONAD_MANIAC_LOG_FORMAT', raising=False)
    _config.reset()
    reset_logging()
    yield
    _config.reset()
    reset_logging()


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from monad_maniac import maybe

    return maybe.of(5)


@pytest.fixture
def sample_absent():
    """Sample Absent value for testing."""
    from monad_maniac import maybe

    return maybe.of(None)


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from monad_maniac import Left

    return Left('Server error')


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from monad_maniac import Right

    return Right(150)
