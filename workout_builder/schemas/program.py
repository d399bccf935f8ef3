"""Program, WorkoutDay and ExercisePrescription schemas."""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

from workout_builder.core.enums import Weekday


class ExercisePrescription(BaseModel):
    """One prescribed exercise: target sets and a free-form rep range (e.g. "6-8" or "30 min")."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=255)
    target_sets: PositiveInt = 3
    target_reps: str = Field(default="8-12", max_length=50)


class WorkoutDay(BaseModel):
    """One weekday's focus and ordered exercise prescriptions."""

    model_config = ConfigDict(frozen=True)

    day: Weekday
    focus: str = Field(default="", max_length=255)
    exercises: tuple[ExercisePrescription, ...] = ()
    rest_day: bool = False

    def exercise_names(self) -> list[str]:
        return [e.name for e in self.exercises]


class Program(BaseModel):
    """Named weekly schedule. Day names are unique within a program."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=255)
    days: tuple[WorkoutDay, ...] = ()

    @model_validator(mode="after")
    def _unique_days(self) -> "Program":
        seen: set[Weekday] = set()
        for d in self.days:
            if d.day in seen:
                raise ValueError(f"Duplicate day in program: {d.day.value}")
            seen.add(d.day)
        return self


# ---- Request bodies for the HTTP surface ----


class ProgramRename(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ProgramSave(BaseModel):
    """Save the active program, optionally under a new name."""

    name: str | None = Field(None, min_length=1, max_length=255)


class ProgramList(BaseModel):
    active: str
    saved: list[str] = []
