"""Workout Builder: weekly program tracker with progressive-overload suggestions and a rest timer."""
