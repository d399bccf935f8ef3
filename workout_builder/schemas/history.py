"""Completed-workout history schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CompletedWorkoutEntry(BaseModel):
    """A record that a day's workout was finished. Never mutated once appended."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    program_name: str
    day: str


class WorkoutFinish(BaseModel):
    day: str = Field(..., min_length=1)
