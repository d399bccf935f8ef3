"""Rest timer - state, configured duration, manual start/cancel."""

from fastapi import APIRouter, Depends

from workout_builder.api.deps import get_session
from workout_builder.schemas.timer import RestTimerConfigure, RestTimerRead, RestTimerStart
from workout_builder.services.session import WorkoutSession

router = APIRouter()


@router.get("", response_model=RestTimerRead)
async def get_timer(session: WorkoutSession = Depends(get_session)):
    """Current countdown. remaining_seconds is 0 when idle."""
    return session.timer.state()


@router.put("", response_model=RestTimerRead)
async def configure_timer(
    payload: RestTimerConfigure,
    session: WorkoutSession = Depends(get_session),
):
    return session.set_rest_duration(payload.duration_seconds)


@router.post("/start", response_model=RestTimerRead)
async def start_timer(
    payload: RestTimerStart,
    session: WorkoutSession = Depends(get_session),
):
    """Start or restart. A running countdown is replaced, never queued."""
    return session.timer.start(payload.duration_seconds)


@router.post("/cancel", response_model=RestTimerRead)
async def cancel_timer(session: WorkoutSession = Depends(get_session)):
    return session.timer.cancel()
