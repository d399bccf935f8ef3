"""Rest timer schemas."""

from pydantic import BaseModel, Field

from workout_builder.core.enums import TimerStatus


class RestTimerRead(BaseModel):
    status: TimerStatus
    remaining_seconds: int = Field(ge=0)
    configured_duration_seconds: int = Field(gt=0)


class RestTimerConfigure(BaseModel):
    duration_seconds: int


class RestTimerStart(BaseModel):
    """Start (or restart) the countdown. 0 or omitted uses the configured duration."""

    duration_seconds: int | None = None
