"""Shared fakes and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from workout_builder.core.exceptions import PersistenceError
from workout_builder.services.persistence import InMemoryGateway
from workout_builder.services.rest_timer import RestTimer
from workout_builder.services.session import WorkoutSession


class ManualHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTickScheduler:
    """Tick source driven by the test instead of a clock."""

    def __init__(self) -> None:
        self.started: list[tuple[ManualHandle, Callable[[], None]]] = []

    def start(self, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle()
        self.started.append((handle, callback))
        return handle

    def advance(self, seconds: int = 1) -> None:
        for _ in range(seconds):
            for handle, callback in list(self.started):
                if not handle.cancelled:
                    callback()


class CollectingNotifier:
    """Records delivered messages for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FailingGateway(InMemoryGateway):
    """Reads work, writes fail."""

    async def set(self, key: str, value: str) -> None:
        raise PersistenceError(f"disk full while writing {key}")


class BrokenNotifier:
    def notify(self, message: str) -> None:
        raise PermissionError("notifications not permitted")


@pytest.fixture
def scheduler() -> ManualTickScheduler:
    return ManualTickScheduler()


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def timer(scheduler, notifier) -> RestTimer:
    return RestTimer(configured_duration=60, scheduler=scheduler, notifier=notifier)


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture
def session(gateway, timer) -> WorkoutSession:
    return WorkoutSession(gateway, timer)
