"""Exercise library search for the "add exercise" picker."""

from fastapi import APIRouter, Query

from workout_builder.core.constants import EXERCISE_SEARCH_LIMIT
from workout_builder.services.program import search_exercises

router = APIRouter()


@router.get("/search", response_model=list[str])
async def search(
    q: str = "",
    limit: int = Query(EXERCISE_SEARCH_LIMIT, ge=1, le=100),
):
    return search_exercises(q, limit=limit)
