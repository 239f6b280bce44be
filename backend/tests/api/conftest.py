"""API test fixtures — app.state wired to an in-memory database.

Invariants:
    - Every test gets a fresh in-memory SQLite database and fresh use cases
    - The lifespan is not run (ASGITransport); fixtures install app.state directly
    - The auto-save quiet period is shortened so draft tests finish quickly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from birthday.infrastructure.database import DatabaseSessionManager
from birthday.infrastructure.profile_store import SqlProfileStore
from birthday.main import app
from birthday.services.profile_repository import ProfileRepository
from birthday.services.use_cases import ProfileUseCases

AUTOSAVE_QUIET_PERIOD = 0.05


@pytest.fixture
async def db():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()


def _install(repository: ProfileRepository, db: DatabaseSessionManager | None):
    use_cases = ProfileUseCases.build(
        repository, autosave_quiet_period=AUTOSAVE_QUIET_PERIOD,
    )
    app.state.db = db
    app.state.use_cases = use_cases
    return use_cases


@pytest.fixture
async def use_cases(db):
    use_cases = _install(ProfileRepository(SqlProfileStore(db), observe_retry_delay=0), db)
    yield use_cases
    await use_cases.name_autosave.close()


@pytest.fixture
async def failing_use_cases(fake_store):
    """Use cases over a store whose every read fails."""
    fake_store.fail("get")
    fake_store.fail("exists")
    use_cases = _install(ProfileRepository(fake_store, observe_retry_delay=0), None)
    yield use_cases
    await use_cases.name_autosave.close()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(use_cases):
    async with _client() as c:
        yield c


@pytest.fixture
async def failing_client(failing_use_cases):
    async with _client() as c:
        yield c
