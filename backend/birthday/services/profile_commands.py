"""Profile Commands — write-side interactors with validation and update-or-create.

Invariants:
    - Sequence: Loading → clean input → reject all-empty → validate → exists? →
      update existing | create partial new → terminal state
    - Validation failures yield the validator message verbatim (never re-mapped)
    - Update-or-create: an absent profile is created carrying ONLY the supplied
      field(s), so name / birthday / picture can be filled in any order
    - Updates on an existing profile touch exactly the supplied fields

Design Decisions:
    - Picture None/blank is rejected by UpdateProfilePicture (validator asymmetry kept);
      ClearProfilePicture is the explicit "remove picture" path
    - SaveProfile on an existing profile issues one partial update per supplied field,
      stopping at the first failure
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import date

from birthday.core.outcome import Outcome
from birthday.core.profile import Profile
from birthday.core.resource import Loading, Resource, Success
from birthday.core.user_messages import (
    BIRTHDAY_REQUIRED_MESSAGE, NOTHING_TO_SAVE_MESSAGE,
)
from birthday.core.validator import (
    NAME_EMPTY, PICTURE_URI_MISSING,
    validate_birthday, validate_name, validate_picture_uri, validate_profile_data,
)
from birthday.services.profile_repository import ProfileRepository
from birthday.services.resource_mapping import error_state, outcome_state, rejected

logger = logging.getLogger(__name__)


def clean_text(value: str | None) -> str | None:
    """Trim; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


async def _update_or_create(
    repository: ProfileRepository,
    update_existing: Callable[[], Awaitable[Outcome]],
    new_profile: Callable[[], Profile],
) -> Resource:
    exists = await repository.exists()
    if exists.is_failure:
        return error_state(exists.error)
    if exists.value:
        outcome = await update_existing()
    else:
        outcome = await repository.save(new_profile())
    return outcome_state(outcome)


class SaveProfile:
    """Save any combination of name / birthday / picture (at least one)."""

    def __init__(
        self, repository: ProfileRepository, today: Callable[[], date] = date.today,
    ):
        self.repository = repository
        self.today = today

    async def __call__(
        self,
        name: str | None = None,
        birthday: date | None = None,
        picture_uri: str | None = None,
    ) -> AsyncIterator[Resource]:
        yield Loading()

        name = clean_text(name)
        picture_uri = clean_text(picture_uri)
        if name is None and birthday is None and picture_uri is None:
            yield rejected(NOTHING_TO_SAVE_MESSAGE)
            return

        validation = validate_profile_data(name, birthday, picture_uri, today=self.today())
        if validation.is_failure:
            yield rejected(validation.error_message)
            return

        async def update_existing() -> Outcome:
            updates = []
            if name is not None:
                updates.append(lambda: self.repository.update_name(name))
            if birthday is not None:
                updates.append(lambda: self.repository.update_birthday(birthday))
            if picture_uri is not None:
                updates.append(lambda: self.repository.update_picture(picture_uri))
            outcome = Outcome.success()
            for apply in updates:
                outcome = await apply()
                if outcome.is_failure:
                    break
            return outcome

        yield await _update_or_create(
            self.repository,
            update_existing,
            lambda: Profile.create(name=name, birthday=birthday, picture_uri=picture_uri),
        )


class UpdateProfileName:

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self, new_name: str | None) -> AsyncIterator[Resource]:
        yield Loading()

        name = clean_text(new_name)
        if name is None:
            yield rejected(NAME_EMPTY, "name")
            return

        validation = validate_name(name)
        if validation.is_failure:
            yield rejected(validation.error_message, "name")
            return

        yield await _update_or_create(
            self.repository,
            lambda: self.repository.update_name(name),
            lambda: Profile.with_name(name),
        )


class UpdateProfileBirthday:

    def __init__(
        self, repository: ProfileRepository, today: Callable[[], date] = date.today,
    ):
        self.repository = repository
        self.today = today

    async def __call__(self, new_birthday: date | None) -> AsyncIterator[Resource]:
        yield Loading()

        if new_birthday is None:
            yield rejected(BIRTHDAY_REQUIRED_MESSAGE, "birthday")
            return

        validation = validate_birthday(new_birthday, self.today())
        if validation.is_failure:
            yield rejected(validation.error_message, "birthday")
            return

        yield await _update_or_create(
            self.repository,
            lambda: self.repository.update_birthday(new_birthday),
            lambda: Profile.with_birthday(new_birthday),
        )


class UpdateProfilePicture:

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self, new_picture_uri: str | None) -> AsyncIterator[Resource]:
        yield Loading()

        picture_uri = clean_text(new_picture_uri)
        if picture_uri is None:
            yield rejected(PICTURE_URI_MISSING, "picture_uri")
            return

        validation = validate_picture_uri(picture_uri)
        if validation.is_failure:
            yield rejected(validation.error_message, "picture_uri")
            return

        yield await _update_or_create(
            self.repository,
            lambda: self.repository.update_picture(picture_uri),
            lambda: Profile.with_picture(picture_uri),
        )


class ClearProfilePicture:
    """Remove the picture reference. No profile means nothing to clear."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self) -> AsyncIterator[Resource]:
        yield Loading()

        exists = await self.repository.exists()
        if exists.is_failure:
            yield error_state(exists.error)
            return
        if not exists.value:
            logger.info("No profile to clear picture from")
            yield Success(None)
            return

        yield outcome_state(await self.repository.update_picture(None))


class DeleteProfile:

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def __call__(self) -> AsyncIterator[Resource]:
        yield Loading()
        yield outcome_state(await self.repository.delete())
