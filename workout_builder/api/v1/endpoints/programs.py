"""Saved programs - save the active program by name and reload it later."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from workout_builder.api.deps import get_session
from workout_builder.schemas.program import Program, ProgramList, ProgramSave
from workout_builder.services.session import WorkoutSession

router = APIRouter()


@router.get("", response_model=ProgramList)
async def list_programs(session: WorkoutSession = Depends(get_session)):
    return ProgramList(active=session.program.name, saved=session.saved_program_names())


@router.post("", response_model=Program, status_code=201)
async def save_program(
    payload: ProgramSave,
    session: WorkoutSession = Depends(get_session),
):
    """Save the active program (optionally renamed first). Re-saving a name overwrites it."""
    return await session.save_program(payload.name)


@router.post("/{name:path}/load", response_model=Program)
async def load_program(
    name: str,
    session: WorkoutSession = Depends(get_session),
):
    """Make a saved program the active one."""
    return await session.load_program(name)
