"""Root conftest — shared test configuration and in-memory profile fixtures."""

import os

import pytest

# Tests never touch the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from birthday.services.profile_repository import ProfileRepository  # noqa: E402
from tests.profile_fakes import TODAY, FakeProfileStore  # noqa: E402


@pytest.fixture
def fake_store():
    return FakeProfileStore()


@pytest.fixture
def repository(fake_store):
    """Repository over the fake store; resubscribes immediately after a fault."""
    return ProfileRepository(fake_store, observe_retry_delay=0)


@pytest.fixture
def today():
    return lambda: TODAY
