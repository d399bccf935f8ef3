"""Completed-workout history and its CSV projection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from workout_builder.core.constants import CSV_HEADER
from workout_builder.core.exceptions import ValidationError
from workout_builder.schemas.history import CompletedWorkoutEntry

logger = logging.getLogger(__name__)


def _as_utc(ts: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 UTC, second precision, Z suffix: 2024-01-01T00:00:00Z."""
    return _as_utc(ts).strftime("%Y-%m-%dT%H:%M:%SZ")


def export_csv(entries: Sequence[CompletedWorkoutEntry]) -> str:
    """
    Header "Date,Program,Day" plus one row per entry, newline-separated, no trailing newline.
    Fields are joined as-is: a comma inside a program or day name shifts the columns.
    """
    rows = [CSV_HEADER]
    rows.extend(",".join((format_timestamp(e.timestamp), e.program_name, e.day)) for e in entries)
    return "\n".join(rows)


class WorkoutHistory:
    """Append-only record of finished workouts, in completion order."""

    def __init__(self, entries: Iterable[CompletedWorkoutEntry] = ()) -> None:
        self._entries: list[CompletedWorkoutEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[CompletedWorkoutEntry]:
        return list(self._entries)

    def finish_workout(
        self,
        program_name: str,
        day: str,
        now: datetime | None = None,
    ) -> CompletedWorkoutEntry:
        if not day or not day.strip():
            raise ValidationError("Day is required to finish a workout")
        entry = CompletedWorkoutEntry(
            timestamp=_as_utc(now) if now else datetime.now(timezone.utc),
            program_name=program_name,
            day=day,
        )
        self._entries.append(entry)
        logger.info("Workout finished: %s / %s", program_name, day)
        return entry

    def export_csv(self) -> str:
        return export_csv(self._entries)
