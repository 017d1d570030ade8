"""This module contains shared fixtures for all unit tests."""

import os
from collections.abc import Callable, Generator

import pytest
from cidadania_legal.providers.config import Config
from cidadania_legal.providers.logging import LoggingProvider


class ManualCall:
    """A scheduled call fired explicitly by the test."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """A deterministic scheduler: time only moves when the test advances it."""

    def __init__(self) -> None:
        self.now = 0.0
        self.calls: list[ManualCall] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(self.now + delay, callback)
        self.calls.append(call)
        return call

    @property
    def pending(self) -> list[ManualCall]:
        return [call for call in self.calls if not call.cancelled and not call.fired]

    def advance(self, seconds: float) -> None:
        """Moves time forward, firing every call that became due, in order."""
        self.now += seconds
        for call in sorted(self.pending, key=lambda item: item.due):
            if call.due <= self.now and not call.cancelled:
                call.fired = True
                call.callback()


@pytest.fixture(scope="session", autouse=True)
def isolate_environment() -> Generator[None, None, None]:
    """Removes application settings from the environment for the whole session.

    Unit tests rely on the defaults declared in `Config`, not on whatever
    the developer's shell exports.
    """
    keys = [key for key in Config.model_fields if key in os.environ]
    saved = {key: os.environ.pop(key) for key in keys}
    yield
    os.environ.update(saved)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(isolate_environment: None) -> None:
    """Configures the application logger once, before any command captures output."""
    LoggingProvider().get_logger()


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Fixture for a deterministic scheduler."""
    return ManualScheduler()


@pytest.fixture
def config() -> Config:
    """Fixture for a config carrying the default delays and required fields."""
    return Config(_env_file=None)
