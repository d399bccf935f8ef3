"""Active program - view, replace, rename, add/remove exercises per day."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from workout_builder.api.deps import get_session
from workout_builder.core.enums import Weekday
from workout_builder.schemas.program import ExercisePrescription, Program, ProgramRename
from workout_builder.services.program import create_program
from workout_builder.services.session import WorkoutSession

router = APIRouter()


@router.get("", response_model=Program)
async def get_program(session: WorkoutSession = Depends(get_session)):
    """The program currently shown to the user."""
    return session.program


@router.put("", response_model=Program)
async def replace_program(
    payload: Program,
    session: WorkoutSession = Depends(get_session),
):
    """Replace the active program wholesale (training days must list at least one exercise)."""
    program = create_program(payload.name, payload.days)
    return await session.replace_program(program)


@router.patch("", response_model=Program)
async def rename_program(
    payload: ProgramRename,
    session: WorkoutSession = Depends(get_session),
):
    return await session.rename_program(payload.name)


@router.post("/days/{day}/exercises", response_model=Program, status_code=201)
async def add_exercise(
    day: Weekday,
    payload: ExercisePrescription,
    session: WorkoutSession = Depends(get_session),
):
    """Append an exercise to a day. 404 if the program has no such day."""
    return await session.add_exercise(day.value, payload)


@router.delete("/days/{day}/exercises/{exercise_name:path}", response_model=Program)
async def remove_exercise(
    day: Weekday,
    exercise_name: str,
    session: WorkoutSession = Depends(get_session),
):
    """Remove an exercise from a day. Removing one that is not there changes nothing."""
    return await session.remove_exercise(day.value, exercise_name)
