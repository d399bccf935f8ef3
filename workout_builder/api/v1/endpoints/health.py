"""Health check endpoint for load balancers and monitoring."""

import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from workout_builder.api.deps import get_session
from workout_builder.core.constants import ACTIVE_PROGRAM_KEY
from workout_builder.core.exceptions import PersistenceError
from workout_builder.services.session import WorkoutSession

router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check. Optionally includes built_at if BACKEND_BUILT_AT env is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(session: WorkoutSession = Depends(get_session)):
    """Readiness: app + storage connectivity."""
    try:
        await session.gateway.get(ACTIVE_PROGRAM_KEY)
        return {"status": "ok", "storage": "connected"}
    except PersistenceError as e:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "storage": str(e)},
        )
