"""Async database engine and session factory."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from workout_builder.core.config import Settings, get_settings
from workout_builder.db.base import Base


def build_engine(settings: Settings | None = None) -> AsyncEngine:
    settings = settings or get_settings()
    return create_async_engine(settings.database_url, echo=settings.database_echo)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create tables directly (tests, local runs). Use Alembic in production."""
    import workout_builder.models  # noqa: F401 - register all models

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
