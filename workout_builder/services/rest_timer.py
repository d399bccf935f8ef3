"""Rest timer: a two-state countdown (idle / counting) driven by an injected tick source.

The transition logic lives entirely in RestTimer.tick(); how ticks are delivered
is the scheduler's business, so tests can drive the timer without waiting on a
wall clock.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from workout_builder.core.constants import REST_COMPLETE_MESSAGE
from workout_builder.core.enums import TimerStatus
from workout_builder.core.exceptions import InvalidInputError
from workout_builder.schemas.timer import RestTimerRead
from workout_builder.services.notifications import Notifier, notify_best_effort

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 1.0


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    def start(self, callback: Callable[[], None]) -> TickHandle: ...


class _RecurringTick:
    """Re-arms itself with loop.call_later until cancelled."""

    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._handle: asyncio.TimerHandle | None = loop.call_later(interval, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._handle = self._loop.call_later(self._interval, self._fire)
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioTickScheduler:
    """Delivers ticks roughly once per interval on the running event loop."""

    def __init__(self, interval: float = TICK_INTERVAL_SECONDS, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self.interval = interval
        self._loop = loop

    def start(self, callback: Callable[[], None]) -> TickHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _RecurringTick(loop, self.interval, callback)


def _check_duration(duration: int, *, allow_zero: bool) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise InvalidInputError(f"Duration must be a whole number of seconds, got {duration!r}")
    if duration < 0 or (duration == 0 and not allow_zero):
        raise InvalidInputError(f"Duration must be positive, got {duration}")
    return duration


class RestTimer:
    """
    Single countdown per session.

    - start(d): cancel any running countdown, count down from d (or the
      configured duration when d is 0/None).
    - tick(): decrement by one; the tick reaching 0 notifies once and goes idle.
    """

    def __init__(
        self,
        configured_duration: int = 60,
        scheduler: TickScheduler | None = None,
        notifier: Notifier | None = None,
        message: str = REST_COMPLETE_MESSAGE,
    ) -> None:
        self._configured = _check_duration(configured_duration, allow_zero=False)
        self._remaining = 0
        self._scheduler = scheduler
        self._notifier = notifier
        self._message = message
        self._handle: TickHandle | None = None

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def configured_duration_seconds(self) -> int:
        return self._configured

    @property
    def status(self) -> TimerStatus:
        return TimerStatus.COUNTING if self._remaining > 0 else TimerStatus.IDLE

    def state(self) -> RestTimerRead:
        return RestTimerRead(
            status=self.status,
            remaining_seconds=self._remaining,
            configured_duration_seconds=self._configured,
        )

    def configure(self, duration: int) -> None:
        """Set the duration used when start() is called without one. Does not touch a running countdown."""
        self._configured = _check_duration(duration, allow_zero=False)

    def start(self, duration: int | None = None) -> RestTimerRead:
        seconds = _check_duration(duration or 0, allow_zero=True) or self._configured
        self._stop_ticks()
        self._remaining = seconds
        if self._scheduler is not None:
            self._handle = self._scheduler.start(self.tick)
        logger.debug("Rest timer started: %ds", seconds)
        return self.state()

    def tick(self) -> None:
        if self._remaining <= 0:
            return
        if self._remaining == 1:
            notify_best_effort(self._notifier, self._message)
            self._remaining = 0
            self._stop_ticks()
            logger.debug("Rest timer complete")
            return
        self._remaining -= 1

    def cancel(self) -> RestTimerRead:
        """Stop counting without notifying."""
        self._stop_ticks()
        self._remaining = 0
        return self.state()

    def _stop_ticks(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
