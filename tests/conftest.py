from __future__ import annotations

from collections.abc import Iterable
from typing import Callable

import pytest

from fortune_cookie import create_app
from fortune_cookie.catalog import FortuneCatalog


class SequenceRandomSource:
    """Replays a fixed list of raw draws; next_int ignores the bound."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.bounds: list[int] = []

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        if not self._values:
            raise AssertionError("random source exhausted")
        value = self._values.pop(0)
        assert 0 <= value < bound
        return value


class ManualTask:
    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when a test calls advance()."""

    def __init__(self) -> None:
        self.now = 0.0
        self.tasks: list[ManualTask] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> ManualTask:
        task = ManualTask(self.now + delay, callback)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> list[ManualTask]:
        return [t for t in self.tasks if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for task in sorted(self.pending, key=lambda t: t.due):
            if task.due <= self.now + 1e-9:
                task.fired = True
                task.callback()


@pytest.fixture
def catalog() -> FortuneCatalog:
    return FortuneCatalog.default()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def app(scheduler):
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "REVEAL_DELAY_MS": 200,
            "REVEAL_SCHEDULER": scheduler,
        }
    )
    yield app
    app.extensions["surface_registry"].close_all()


@pytest.fixture
def client(app):
    return app.test_client()
