"""Set logging and per-exercise progression."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from workout_builder.api.deps import get_session
from workout_builder.core.enums import Weekday
from workout_builder.schemas.set_log import ExerciseLogRead, SetLoggedRead, SetLogCreate
from workout_builder.services.session import WorkoutSession

router = APIRouter()


@router.post("", response_model=SetLoggedRead, status_code=201)
async def log_set(
    payload: SetLogCreate,
    session: WorkoutSession = Depends(get_session),
):
    """
    Log one set. Weight/reps arrive exactly as typed; non-numeric values are a 422
    and nothing is stored. Restarts the rest timer with the configured duration.
    """
    entry = await session.log_set(payload.day.value, payload.exercise, payload.weight, payload.reps)
    return SetLoggedRead(
        logged=entry,
        suggested_weight=session.suggestion(payload.day.value, payload.exercise),
        timer=session.timer.state(),
    )


@router.get("/{day}/{exercise_name:path}", response_model=ExerciseLogRead)
async def get_exercise_log(
    day: Weekday,
    exercise_name: str,
    session: WorkoutSession = Depends(get_session),
):
    """All sets for one (day, exercise), the suggested next weight, and chart points."""
    return ExerciseLogRead(
        day=day,
        exercise=exercise_name,
        sets=session.sets(day.value, exercise_name),
        suggested_weight=session.suggestion(day.value, exercise_name),
        trend=session.trend(day.value, exercise_name),
    )
