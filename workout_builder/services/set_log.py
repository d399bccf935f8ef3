"""Append-only log of performed sets, keyed by (day, exercise name)."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from workout_builder.core.enums import Weekday
from workout_builder.core.exceptions import InvalidInputError
from workout_builder.schemas.set_log import LoggedSet, SetLogRecord

logger = logging.getLogger(__name__)

SetKey = tuple[str, str]


def parse_day(raw: Weekday | str) -> str:
    """Canonical weekday name ("Monday"), so keys line up with program days."""
    try:
        return Weekday(raw).value
    except ValueError:
        raise InvalidInputError(f"Unknown day: {raw!r}") from None


def parse_weight(raw: float | int | str) -> float:
    """Weight as a finite, non-negative float. Numeric strings are accepted."""
    if isinstance(raw, bool):
        raise InvalidInputError(f"Weight must be a number, got {raw!r}")
    try:
        weight = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Weight must be a number, got {raw!r}") from None
    if not math.isfinite(weight) or weight < 0:
        raise InvalidInputError(f"Weight must be a non-negative number, got {raw!r}")
    return weight


def parse_reps(raw: int | float | str) -> int:
    """Reps as a non-negative integer. "8" and 8.0 are fine; "8.5" and "abc" are not."""
    if isinstance(raw, bool):
        raise InvalidInputError(f"Reps must be a whole number, got {raw!r}")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidInputError(f"Reps must be a whole number, got {raw!r}")
        reps = int(raw)
    else:
        try:
            reps = int(raw.strip() if isinstance(raw, str) else raw)
        except (TypeError, ValueError):
            raise InvalidInputError(f"Reps must be a whole number, got {raw!r}") from None
    if reps < 0:
        raise InvalidInputError(f"Reps must be non-negative, got {raw!r}")
    return reps


class SetLog:
    """
    Chronological sets per (day, exercise). Entries are only ever appended;
    session_index is assigned at append time as previous count + 1.
    """

    def __init__(self) -> None:
        self._sets: dict[SetKey, list[LoggedSet]] = {}

    def __len__(self) -> int:
        return sum(len(v) for v in self._sets.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetLog):
            return NotImplemented
        return self._sets == other._sets

    def keys(self) -> list[SetKey]:
        return list(self._sets)

    def sets_for(self, day: Weekday | str, exercise_name: str) -> list[LoggedSet]:
        try:
            key = (parse_day(day), exercise_name)
        except InvalidInputError:
            return []
        return list(self._sets.get(key, []))

    def log_set(
        self,
        day: Weekday | str,
        exercise_name: str,
        weight: float | int | str,
        reps: int | float | str,
    ) -> LoggedSet:
        """Validate then append. Bad input raises InvalidInputError before anything changes."""
        if not day or not exercise_name:
            raise InvalidInputError("Day and exercise name are required")
        day = parse_day(day)
        w = parse_weight(weight)
        r = parse_reps(reps)
        existing = self._sets.setdefault((day, exercise_name), [])
        entry = LoggedSet(weight=w, reps=r, session_index=len(existing) + 1)
        existing.append(entry)
        logger.debug("Logged %s/%s #%d: %s x %d", day, exercise_name, entry.session_index, w, r)
        return entry

    # ---- Serialization ----

    def to_records(self) -> list[SetLogRecord]:
        return [
            SetLogRecord(day=day, exercise=exercise, sets=list(sets))
            for (day, exercise), sets in self._sets.items()
        ]

    @classmethod
    def from_records(cls, records: Iterable[SetLogRecord]) -> "SetLog":
        log = cls()
        for rec in records:
            log._sets.setdefault((rec.day, rec.exercise), []).extend(rec.sets)
        return log
