"""Profile Repository — translates store rows and faults into domain outcomes.

Invariants:
    - No method raises: every result is an Outcome (success value or BirthdayError)
    - Storage faults become DatabaseError tagged with the attempted DataOperation
    - Zero rows affected on update/delete becomes ProfileNotFoundError
    - observe() never terminates on a fault: it emits ProfileFault and resubscribes
    - No validation and no user-facing text here (interactors own both)

Design Decisions:
    - Date parse failures are logged here, then coerced to an absent birthday
    - Resubscribe delay is injected (settings.observe_retry_delay_ms) so a dead store
      does not spin
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from datetime import date

from birthday.core.date_codec import (
    DateParseFailure, format_stored_date, parse_stored_date,
)
from birthday.core.domain_types import (
    SINGLE_PROFILE_ID, DataOperation, ProfileField,
)
from birthday.core.errors import (
    BirthdayError, DatabaseError, ErrorContext, ProfileNotFoundError,
)
from birthday.core.observation import (
    ProfileEmpty, ProfileFault, ProfileSnapshot, ProfileValue,
)
from birthday.core.outcome import Outcome
from birthday.core.profile import Profile
from birthday.core.repository_protocols import ProfileRecord, ProfileStore

logger = logging.getLogger(__name__)


def _wrap(error: Exception, operation: DataOperation) -> BirthdayError:
    if isinstance(error, BirthdayError):
        return error
    return DatabaseError(
        str(error), operation,
        ErrorContext(profile_id=SINGLE_PROFILE_ID, debug_info={"type": type(error).__name__}),
    )


class ProfileRepository:
    """Domain-facing access to the singleton profile."""

    def __init__(self, store: ProfileStore, observe_retry_delay: float = 1.0):
        self.store = store
        self.observe_retry_delay = observe_retry_delay

    # ─── Mapping ─────────────────────────────────────────────────

    def _to_profile(self, record: ProfileRecord) -> Profile:
        parsed = parse_stored_date(record.birthday)
        birthday = None
        if isinstance(parsed, DateParseFailure):
            logger.warning(
                f"Discarding unreadable stored birthday: {parsed.reason}",
                extra={"profile_id": record.id, "field": ProfileField.BIRTHDAY.value},
            )
        else:
            birthday = parsed.value
        return Profile(
            id=record.id,
            name=record.name,
            birthday=birthday,
            picture_uri=record.picture_uri,
        )

    @staticmethod
    def _to_record(profile: Profile) -> ProfileRecord:
        return ProfileRecord(
            id=profile.id,
            name=profile.name,
            birthday=format_stored_date(profile.birthday),
            picture_uri=profile.picture_uri,
        )

    def _snapshot(self, record: ProfileRecord | None) -> ProfileSnapshot:
        if record is None:
            return ProfileEmpty()
        return ProfileValue(self._to_profile(record))

    # ─── Reads ───────────────────────────────────────────────────

    async def observe(self) -> AsyncIterator[ProfileSnapshot]:
        while True:
            stream = self.store.change_stream(SINGLE_PROFILE_ID)
            try:
                async for record in stream:
                    yield self._snapshot(record)
                return
            except Exception as e:
                error = _wrap(e, DataOperation.RETRIEVE)
                logger.error(
                    f"Profile observation failed, resubscribing: {e}",
                    extra={"profile_id": SINGLE_PROFILE_ID, "error_code": error.code},
                )
                yield ProfileFault(error)
                await asyncio.sleep(self.observe_retry_delay)
            finally:
                await stream.aclose()

    async def get_once(self) -> Outcome[Profile | None]:
        try:
            record = await self.store.get(SINGLE_PROFILE_ID)
        except Exception as e:
            return Outcome.failure(_wrap(e, DataOperation.RETRIEVE))
        return Outcome.success(self._to_profile(record) if record else None)

    async def exists(self) -> Outcome[bool]:
        try:
            return Outcome.success(await self.store.exists(SINGLE_PROFILE_ID))
        except Exception as e:
            return Outcome.failure(_wrap(e, DataOperation.RETRIEVE))

    # ─── Writes ──────────────────────────────────────────────────

    async def save(self, profile: Profile) -> Outcome[None]:
        """Upsert: replaces the whole singleton row."""
        try:
            await self.store.upsert(self._to_record(profile))
        except Exception as e:
            return Outcome.failure(_wrap(e, DataOperation.UPDATE))
        return Outcome.success()

    async def _update_field(self, field: ProfileField, value: str | None) -> Outcome[None]:
        try:
            rows = await self.store.update_field(SINGLE_PROFILE_ID, field, value)
        except Exception as e:
            return Outcome.failure(_wrap(e, DataOperation.UPDATE))
        if rows == 0:
            return Outcome.failure(ProfileNotFoundError(
                SINGLE_PROFILE_ID, ErrorContext(field_name=field.value),
            ))
        return Outcome.success()

    async def update_name(self, name: str) -> Outcome[None]:
        return await self._update_field(ProfileField.NAME, name.strip())

    async def update_birthday(self, birthday: date) -> Outcome[None]:
        return await self._update_field(
            ProfileField.BIRTHDAY, format_stored_date(birthday),
        )

    async def update_picture(self, picture_uri: str | None) -> Outcome[None]:
        value = picture_uri.strip() if picture_uri is not None else None
        return await self._update_field(ProfileField.PICTURE_URI, value)

    async def delete(self) -> Outcome[None]:
        try:
            rows = await self.store.delete(SINGLE_PROFILE_ID)
        except Exception as e:
            return Outcome.failure(_wrap(e, DataOperation.DELETE))
        if rows == 0:
            return Outcome.failure(ProfileNotFoundError(SINGLE_PROFILE_ID))
        return Outcome.success()
