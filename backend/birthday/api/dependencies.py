"""Route dependencies — process-wide handles stored on app.state by the lifespan."""

from fastapi import Request

from birthday.infrastructure.database import DatabaseSessionManager
from birthday.services.use_cases import ProfileUseCases


def get_use_cases(request: Request) -> ProfileUseCases:
    return request.app.state.use_cases


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db", None)
