"""Profile Queries — read-side interactors: get, observe, exists, display data.

Invariants:
    - Every interactor yields Loading first
    - One-shot interactors then yield exactly one terminal state
    - ObserveProfile yields Loading once per subscription, then one state per snapshot,
      and stops the underlying subscription when its consumer closes it

Design Decisions:
    - Async generators as the state sequence: callers iterate, cancel by closing
    - today / choose_theme injected so display data is reproducible in tests
"""

from collections.abc import AsyncIterator, Callable
from datetime import date

from birthday.core.display import compose, random_theme
from birthday.core.domain_types import SINGLE_PROFILE_ID, BirthdayTheme
from birthday.core.errors import IncompleteProfileError, ProfileNotFoundError
from birthday.core.observation import ProfileEmpty, ProfileFault, ProfileValue
from birthday.core.resource import Error, Loading, Resource, Success
from birthday.core.user_messages import (
    INCOMPLETE_PROFILE_MESSAGE, NO_PROFILE_MESSAGE,
)
from birthday.services.profile_repository import ProfileRepository
from birthday.services.resource_mapping import error_state, outcome_state


class GetProfile:
    """Read the profile once. Success(None) when no profile exists yet."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self) -> AsyncIterator[Resource]:
        yield Loading()
        outcome = await self.repository.get_once()
        yield outcome_state(outcome, outcome.value)


class ProfileExists:

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self) -> AsyncIterator[Resource]:
        yield Loading()
        outcome = await self.repository.exists()
        yield outcome_state(outcome, outcome.value)


class ObserveProfile:
    """Long-lived profile observation."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self) -> AsyncIterator[Resource]:
        yield Loading()
        snapshots = self.repository.observe()
        try:
            async for snapshot in snapshots:
                match snapshot:
                    case ProfileValue(profile=profile):
                        yield Success(profile)
                    case ProfileEmpty():
                        yield Success(None)
                    case ProfileFault(error=error):
                        yield error_state(error)
        finally:
            await snapshots.aclose()


class GetBirthdayDisplayData:
    """Derive celebration data (age + random theme) from a complete profile."""

    def __init__(
        self,
        repository: ProfileRepository,
        today: Callable[[], date] = date.today,
        choose_theme: Callable[[], BirthdayTheme] = random_theme,
    ):
        self.repository = repository
        self.today = today
        self.choose_theme = choose_theme

    async def __call__(self) -> AsyncIterator[Resource]:
        yield Loading()

        outcome = await self.repository.get_once()
        if outcome.is_failure:
            yield error_state(outcome.error)
            return

        profile = outcome.value
        if profile is None:
            yield Error(NO_PROFILE_MESSAGE, cause=ProfileNotFoundError(SINGLE_PROFILE_ID))
            return
        if not profile.is_complete:
            yield Error(
                INCOMPLETE_PROFILE_MESSAGE,
                cause=IncompleteProfileError(profile.missing_required()),
            )
            return

        yield Success(compose(profile, self.today(), self.choose_theme))
