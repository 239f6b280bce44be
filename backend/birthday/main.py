"""Birthday API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BirthdayError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The lifespan is the process root: it builds the database handle, store,
      repository and use cases, stores them on app.state and tears them down

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Dependencies flow from app.state into routes; no module-level database singleton
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from birthday.api.error_handlers import register_error_handlers
from birthday.api.routes import health, profile, profile_stream
from birthday.config import get_settings
from birthday.infrastructure.change_notifier import ChangeNotifier
from birthday.infrastructure.database import DatabaseSessionManager
from birthday.infrastructure.observability import setup_logging
from birthday.infrastructure.profile_store import SqlProfileStore
from birthday.services.profile_repository import ProfileRepository
from birthday.services.use_cases import ProfileUseCases

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db = DatabaseSessionManager(settings.database_url)
    if settings.database_auto_create:
        await db.create_all()
    store = SqlProfileStore(db, ChangeNotifier())
    repository = ProfileRepository(
        store, observe_retry_delay=settings.observe_retry_delay_ms / 1000,
    )
    app.state.db = db
    app.state.use_cases = ProfileUseCases.build(
        repository, autosave_quiet_period=settings.autosave_quiet_period_ms / 1000,
    )
    logger.info("Birthday API started")
    yield
    logger.info("Birthday API shutting down")
    await app.state.use_cases.name_autosave.close()
    await db.dispose()


app = FastAPI(
    title="Birthday API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(profile.router)
app.include_router(profile_stream.router)

register_error_handlers(app)
