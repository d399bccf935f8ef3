"""LoggedSet schemas and set-logging request/response bodies."""

from pydantic import BaseModel, ConfigDict, Field

from workout_builder.core.enums import Weekday
from workout_builder.schemas.timer import RestTimerRead


class LoggedSet(BaseModel):
    """One performed set. session_index is its 1-based position in the (day, exercise) log."""

    model_config = ConfigDict(frozen=True)

    weight: float = Field(ge=0)
    reps: int = Field(ge=0)
    session_index: int = Field(ge=1)


class TrendPoint(BaseModel):
    """Chart data: session ordinal on x, logged weight on y."""

    model_config = ConfigDict(frozen=True)

    session_index: int
    weight: float


class SetLogRecord(BaseModel):
    """Serialized form of one SetLog key (JSON object keys cannot be tuples)."""

    day: str
    exercise: str
    sets: list[LoggedSet] = []


class SetLogCreate(BaseModel):
    """Raw values captured by the presentation layer; parsed by the set log, not here."""

    day: Weekday
    exercise: str = Field(..., min_length=1)
    weight: float | str
    reps: int | str


class ExerciseLogRead(BaseModel):
    day: Weekday
    exercise: str
    sets: list[LoggedSet] = []
    suggested_weight: float | None = None
    trend: list[TrendPoint] = []


class SetLoggedRead(BaseModel):
    """Response to logging a set: the new set, the recomputed suggestion and the restarted timer."""

    logged: LoggedSet
    suggested_weight: float | None = None
    timer: RestTimerRead
