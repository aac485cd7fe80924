"""Shared fixtures for ripple tests."""

import pytest
import structlog

from ripple.config import get_settings
from ripple.signals import WindowSource


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; re-read them for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class Recorder:
    """Presentational stand-in that records the props of every render."""

    def __init__(self, name: str = "Recorder"):
        self.__name__ = name
        self.calls: list[dict] = []

    def __call__(self, **props):
        self.calls.append(props)
        return f"<span>{props['count']}</span>"

    @property
    def last(self) -> dict:
        return self.calls[-1]


class CountingSource(WindowSource):
    """WindowSource that remembers every subscribe/unsubscribe call."""

    def __init__(self, width: int = 0, height: int = 0):
        super().__init__(width, height)
        self.subscribed = 0
        self.unsubscribed = 0

    def subscribe(self, listener):
        super().subscribe(listener)
        self.subscribed += 1

    def unsubscribe(self, listener):
        super().unsubscribe(listener)
        self.unsubscribed += 1


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder


@pytest.fixture
def window():
    return WindowSource(800, 600)


@pytest.fixture
def counting_window():
    return CountingSource(800, 600)
