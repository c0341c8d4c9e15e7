"""Shared fixtures for ZenReader tests."""

import pytest
from fastapi.testclient import TestClient

from zenreader.api.dependencies import get_engine
from zenreader.main import create_app
from zenreader.services.engine import PlaybackEngine


class FakeHandle:
    """Stand-in for asyncio.TimerHandle."""

    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock exposing asyncio's ``call_later`` signature."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def next_delay(self):
        """Seconds until the only pending callback fires."""
        (handle,) = self.pending
        return handle.when - self.now

    def advance(self, seconds):
        """Move the clock forward, firing due callbacks in order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.now = max(self.now, handle.when)
            handle.fired = True
            handle.callback(*handle.args)
        self.now = target

    def run_all(self, limit=10_000):
        """Fire callbacks until nothing is pending."""
        for _ in range(limit):
            if not self.pending:
                return
            handle = min(self.pending, key=lambda h: h.when)
            self.advance(handle.when - self.now)
        raise AssertionError("Scheduler did not settle")


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def engine(scheduler):
    """Engine at 60 WPM so the base delay is exactly one second."""
    return PlaybackEngine(scheduler, default_wpm=60, min_wpm=50, max_wpm=1000)


@pytest.fixture
def reader_engine(scheduler):
    """Engine with the default speed bounds, as the API builds it."""
    return PlaybackEngine(scheduler, default_wpm=350)


@pytest.fixture
def app(reader_engine):
    application = create_app()
    application.dependency_overrides[get_engine] = lambda: reader_engine
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
