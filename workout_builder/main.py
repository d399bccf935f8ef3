"""FastAPI application factory and lifespan."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from workout_builder.api.v1 import api_router
from workout_builder.core.config import Settings, get_settings
from workout_builder.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    PersistenceError,
    ValidationError,
    WorkoutBuilderError,
)
from workout_builder.db.session import build_engine, build_session_maker, create_schema
from workout_builder.services.notifications import LoggingNotifier, Notifier
from workout_builder.services.persistence import PersistenceGateway, SqlGateway
from workout_builder.services.rest_timer import AsyncioTickScheduler, RestTimer, TickScheduler
from workout_builder.services.session import WorkoutSession

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[WorkoutBuilderError], int] = {
    ValidationError: 422,
    InvalidInputError: 422,
    NotFoundError: 404,
    PersistenceError: 503,
}


async def domain_error_handler(request: Request, exc: WorkoutBuilderError) -> JSONResponse:
    status = next((code for cls, code in _STATUS_BY_ERROR.items() if isinstance(exc, cls)), 400)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


def create_application(
    settings: Settings | None = None,
    gateway: PersistenceGateway | None = None,
    scheduler: TickScheduler | None = None,
    notifier: Notifier | None = None,
) -> FastAPI:
    """
    Build the app. Without an explicit gateway the lifespan opens the configured
    database and stores state in the kv_entries table.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: open storage and load the session; shutdown: release the engine."""
        engine = None
        store = gateway
        if store is None:
            engine = build_engine(settings)
            if settings.auto_create_schema:
                await create_schema(engine)
            store = SqlGateway(build_session_maker(engine))
        timer = RestTimer(
            configured_duration=settings.default_rest_seconds,
            scheduler=scheduler or AsyncioTickScheduler(),
            notifier=notifier or LoggingNotifier(),
            message=settings.rest_complete_message,
        )
        app.state.workout_session = await WorkoutSession.load(store, timer)
        yield
        timer.cancel()
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow everything in debug; otherwise localhost dev servers plus CORS_ORIGINS
    if settings.debug:
        cors_origins = ["*"]
    else:
        cors_origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            *[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(WorkoutBuilderError, domain_error_handler)

    @app.get("/")
    def root():
        return {"status": "ok", "message": "Workout Builder API"}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
