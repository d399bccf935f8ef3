"""API v1 router aggregation."""

from fastapi import APIRouter

from workout_builder.api.v1.endpoints import (
    exercises,
    health,
    history,
    program,
    programs,
    sets,
    timer,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(program.router, prefix="/program", tags=["program"])
api_router.include_router(programs.router, prefix="/programs", tags=["programs"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(sets.router, prefix="/sets", tags=["sets"])
api_router.include_router(timer.router, prefix="/timer", tags=["timer"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
