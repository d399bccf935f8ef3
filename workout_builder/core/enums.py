"""Shared enums for schemas and API."""

from enum import Enum


class Weekday(str, Enum):
    """Calendar day a WorkoutDay is scheduled on."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class TimerStatus(str, Enum):
    """Rest timer state."""

    IDLE = "idle"  # remaining_seconds == 0, nothing displayed
    COUNTING = "counting"  # remaining_seconds > 0
