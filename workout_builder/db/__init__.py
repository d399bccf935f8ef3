"""Database package: engine, session, base."""

from workout_builder.db.session import build_engine, build_session_maker, create_schema

__all__ = ["build_engine", "build_session_maker", "create_schema"]
