"""Completed-workout history and CSV export."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from workout_builder.api.deps import get_session
from workout_builder.schemas.history import CompletedWorkoutEntry, WorkoutFinish
from workout_builder.services.session import WorkoutSession

router = APIRouter()


@router.get("", response_model=list[CompletedWorkoutEntry])
async def list_history(session: WorkoutSession = Depends(get_session)):
    """Finished workouts, oldest first."""
    return session.history.entries


@router.post("", response_model=CompletedWorkoutEntry, status_code=201)
async def finish_workout(
    payload: WorkoutFinish,
    session: WorkoutSession = Depends(get_session),
):
    """Mark a day's workout of the active program as finished (timestamped now)."""
    return await session.finish_workout(payload.day)


@router.get("/export", response_class=PlainTextResponse)
async def export_history(session: WorkoutSession = Depends(get_session)):
    """CSV: Date,Program,Day. Values are not quoted."""
    return PlainTextResponse(
        session.export_history_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="workout_history.csv"'},
    )
