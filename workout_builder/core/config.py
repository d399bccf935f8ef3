"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from workout_builder.core.constants import REST_COMPLETE_MESSAGE


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Workout Builder API"
    debug: bool = False
    environment: str = "development"

    # API
    api_v1_prefix: str = "/api/v1"

    # Storage (key-value table; any async SQLAlchemy URL works, e.g. postgresql+asyncpg://...)
    database_url: str = "sqlite+aiosqlite:///./workout_builder.db"
    database_echo: bool = False
    auto_create_schema: bool = True  # create tables at startup; disable when Alembic manages the schema

    # Rest timer
    default_rest_seconds: int = 60
    rest_complete_message: str = REST_COMPLETE_MESSAGE

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    @property
    def sync_database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return (
            self.database_url.replace("+aiosqlite", "")
            .replace("+asyncpg", "+psycopg2")
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
