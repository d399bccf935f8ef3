"""Shared route dependencies."""

from fastapi import Request

from workout_builder.services.session import WorkoutSession


def get_session(request: Request) -> WorkoutSession:
    """The single WorkoutSession created in the app lifespan."""
    return request.app.state.workout_session
