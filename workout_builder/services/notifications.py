"""Fire-and-forget "rest complete" delivery. How it is shown is up to the caller."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class LoggingNotifier:
    """Default notifier: writes the message to the application log."""

    def notify(self, message: str) -> None:
        logger.info("Notification: %s", message)


def notify_best_effort(notifier: Notifier | None, message: str) -> None:
    """Deliver if possible. A missing or failing notifier is logged, never raised."""
    if notifier is None:
        return
    try:
        notifier.notify(message)
    except Exception as e:
        logger.exception("Notification delivery failed: %s", e)
