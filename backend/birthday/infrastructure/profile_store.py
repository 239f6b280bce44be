"""SQL Profile Store — ProfileStore implementation over async SQLAlchemy.

Invariants:
    - Every write commits in its own session, then publishes a change signal
    - change_stream emits the current row on subscription, then once per signal
    - Rows leave this module as ProfileRecord (never as live ORM objects)
    - Storage faults propagate as exceptions; translating them is the repository's job

Design Decisions:
    - session.merge() for upsert: one statement path for insert and replace
    - update_field uses a bulk UPDATE so rows-affected (0 | 1) comes from the database
"""

import logging
from collections.abc import AsyncIterator

from sqlalchemy import delete, exists, select, update

from birthday.core.domain_types import DataOperation, ProfileField, ProfileId
from birthday.core.repository_protocols import ProfileRecord
from birthday.infrastructure.change_notifier import ChangeNotifier
from birthday.infrastructure.database import DatabaseSessionManager
from birthday.models.profile import ProfileRow

logger = logging.getLogger(__name__)

_COLUMNS = {
    ProfileField.NAME: ProfileRow.name,
    ProfileField.BIRTHDAY: ProfileRow.birthday,
    ProfileField.PICTURE_URI: ProfileRow.picture_uri,
}


def _to_record(row: ProfileRow) -> ProfileRecord:
    return ProfileRecord(
        id=ProfileId(row.id),
        name=row.name,
        birthday=row.birthday,
        picture_uri=row.picture_uri,
    )


class SqlProfileStore:
    """Singleton-row persistence with change notifications."""

    def __init__(self, db: DatabaseSessionManager, notifier: ChangeNotifier | None = None):
        self.db = db
        self.notifier = notifier or ChangeNotifier()

    async def get(self, profile_id: ProfileId) -> ProfileRecord | None:
        async with self.db.session(DataOperation.RETRIEVE) as session:
            row = await session.get(ProfileRow, profile_id)
            return _to_record(row) if row else None

    async def upsert(self, record: ProfileRecord) -> None:
        async with self.db.session(DataOperation.UPDATE) as session:
            await session.merge(ProfileRow(
                id=record.id,
                name=record.name,
                birthday=record.birthday,
                picture_uri=record.picture_uri,
            ))
            await session.commit()
        logger.debug("Profile upserted", extra={"profile_id": record.id})
        self.notifier.publish(record.id)

    async def update_field(
        self, profile_id: ProfileId, field: ProfileField, value: str | None,
    ) -> int:
        column = _COLUMNS[field]
        async with self.db.session(DataOperation.UPDATE) as session:
            result = await session.execute(
                update(ProfileRow)
                .where(ProfileRow.id == profile_id)
                .values({column.key: value})
            )
            rows = result.rowcount or 0
            await session.commit()
        if rows:
            self.notifier.publish(profile_id)
        return rows

    async def exists(self, profile_id: ProfileId) -> bool:
        async with self.db.session(DataOperation.RETRIEVE) as session:
            result = await session.execute(
                select(exists().where(ProfileRow.id == profile_id)),
            )
            return bool(result.scalar())

    async def delete(self, profile_id: ProfileId) -> int:
        async with self.db.session(DataOperation.DELETE) as session:
            result = await session.execute(
                delete(ProfileRow).where(ProfileRow.id == profile_id),
            )
            rows = result.rowcount or 0
            await session.commit()
        if rows:
            self.notifier.publish(profile_id)
        return rows

    async def change_stream(
        self, profile_id: ProfileId,
    ) -> AsyncIterator[ProfileRecord | None]:
        queue = self.notifier.subscribe(profile_id)
        try:
            yield await self.get(profile_id)
            while True:
                await queue.get()
                yield await self.get(profile_id)
        finally:
            self.notifier.unsubscribe(profile_id, queue)
