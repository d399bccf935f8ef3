"""Program construction and pure editing helpers.

Edits never mutate their input: each returns a new Program in which only the
targeted day differs, so every other day compares equal to the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from workout_builder.core.constants import (
    DEFAULT_PROGRAM_NAME,
    EXERCISE_LIBRARY,
    EXERCISE_SEARCH_LIMIT,
)
from workout_builder.core.enums import Weekday
from workout_builder.core.exceptions import NotFoundError, ValidationError
from workout_builder.schemas.program import ExercisePrescription, Program, WorkoutDay


def _error_text(e: PydanticValidationError) -> str:
    return "; ".join(err["msg"] for err in e.errors())


def parse_weekday(day: Weekday | str) -> Weekday:
    """Weekday from its name; raises ValidationError for anything else."""
    try:
        return Weekday(day)
    except ValueError:
        raise ValidationError(f"Unknown day: {day}") from None


def create_program(name: str, days: Iterable[WorkoutDay | Mapping[str, Any]]) -> Program:
    """
    Build a validated Program. Raises ValidationError on duplicate weekdays,
    on a training day (rest_day=False) with no exercises, or on malformed fields.
    """
    try:
        program = Program(name=name, days=tuple(days))
    except PydanticValidationError as e:
        raise ValidationError(_error_text(e)) from e
    for d in program.days:
        if not d.rest_day and not d.exercises:
            raise ValidationError(f"{d.day.value} has no exercises and is not a rest day")
    return program


def _replace_day(program: Program, day: Weekday | str, update) -> Program:
    # A weekday the program does not schedule matches nothing
    target = parse_weekday(day)
    days = tuple(update(d) if d.day == target else d for d in program.days)
    return program.model_copy(update={"days": days})


def add_exercise(program: Program, day: Weekday | str, prescription: ExercisePrescription) -> Program:
    """Append a prescription to one day. A day not in the program leaves it unchanged."""
    return _replace_day(
        program,
        day,
        lambda d: d.model_copy(update={"exercises": (*d.exercises, prescription)}),
    )


def remove_exercise(program: Program, day: Weekday | str, exercise_name: str) -> Program:
    """Drop every prescription named exercise_name from one day. Missing exercise is a no-op."""
    return _replace_day(
        program,
        day,
        lambda d: d.model_copy(
            update={"exercises": tuple(e for e in d.exercises if e.name != exercise_name)}
        ),
    )


def rename_program(program: Program, name: str) -> Program:
    if not name or not name.strip():
        raise ValidationError("Program name must not be empty")
    return program.model_copy(update={"name": name.strip()})


def get_day(program: Program, day: Weekday | str) -> WorkoutDay:
    try:
        target = Weekday(day)
    except ValueError:
        raise NotFoundError(f"Unknown day: {day}") from None
    for d in program.days:
        if d.day == target:
            return d
    raise NotFoundError(f"{target.value} is not in program {program.name!r}")


def search_exercises(term: str, limit: int = EXERCISE_SEARCH_LIMIT) -> list[str]:
    """Case-insensitive substring match over the exercise library, in library order."""
    needle = (term or "").lower()
    return [name for name in EXERCISE_LIBRARY if needle in name.lower()][:limit]


def default_program() -> Program:
    """Seed program used on first start."""
    return create_program(
        DEFAULT_PROGRAM_NAME,
        [
            WorkoutDay(
                day=Weekday.MONDAY,
                focus="Upper Body Strength",
                exercises=(
                    ExercisePrescription(name="Bench Press", target_sets=4, target_reps="5-6"),
                    ExercisePrescription(name="Barbell Row", target_sets=4, target_reps="6-8"),
                ),
            ),
            WorkoutDay(
                day=Weekday.TUESDAY,
                focus="Lower Body Strength",
                exercises=(
                    ExercisePrescription(name="Back Squat", target_sets=4, target_reps="5-6"),
                    ExercisePrescription(name="Romanian Deadlift", target_sets=3, target_reps="8-10"),
                ),
            ),
            WorkoutDay(
                day=Weekday.WEDNESDAY,
                focus="Recovery / Mobility",
                exercises=(
                    ExercisePrescription(name="Zone 2 walk/jog", target_sets=1, target_reps="30-40 min"),
                ),
            ),
            WorkoutDay(
                day=Weekday.THURSDAY,
                focus="Upper Hypertrophy",
                exercises=(
                    ExercisePrescription(name="Incline Press", target_sets=3, target_reps="8-12"),
                    ExercisePrescription(name="EZ Curls", target_sets=3, target_reps="10-12"),
                ),
            ),
            WorkoutDay(
                day=Weekday.FRIDAY,
                focus="Lower Hinge + Core",
                exercises=(
                    ExercisePrescription(name="Deadlift", target_sets=3, target_reps="3-5"),
                    ExercisePrescription(name="Hanging Leg Raise", target_sets=3, target_reps="10-15"),
                ),
            ),
            WorkoutDay(
                day=Weekday.SATURDAY,
                focus="Murph Prep Conditioning",
                exercises=(
                    ExercisePrescription(name="1 Mile Run", target_sets=1, target_reps="1 mile"),
                ),
            ),
            WorkoutDay(day=Weekday.SUNDAY, focus="Rest", rest_day=True),
        ],
    )
