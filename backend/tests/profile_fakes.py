"""In-memory ProfileStore with fault injection, plus state-collection helpers.

Invariants:
    - Satisfies the ProfileStore protocol with the same change_stream semantics as
      the SQL store (current row on subscribe, then one row per write signal)
    - fail(operation) makes every later call of that operation raise until heal()
    - calls records every store operation attempted, in order
"""

from dataclasses import replace
from datetime import date

from birthday.core.domain_types import ProfileField, ProfileId
from birthday.core.repository_protocols import ProfileRecord
from birthday.infrastructure.change_notifier import ChangeNotifier

WRITE_OPERATIONS = ("upsert", "update_field", "delete")
TODAY = date(2026, 10, 18)


class StoreFault(Exception):
    """Raised by FakeProfileStore for injected failures."""


class FakeProfileStore:

    def __init__(self, record: ProfileRecord | None = None):
        self.record = record
        self.notifier = ChangeNotifier()
        self.failing: dict[str, Exception] = {}
        self.calls: list[str] = []

    def fail(self, operation: str, error: Exception | None = None) -> None:
        self.failing[operation] = error or StoreFault(f"disk I/O error during {operation}")

    def heal(self) -> None:
        self.failing.clear()

    @property
    def writes(self) -> list[str]:
        return [c for c in self.calls if c in WRITE_OPERATIONS]

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        error = self.failing.get(operation)
        if error is not None:
            raise error

    def _current(self, profile_id: ProfileId) -> ProfileRecord | None:
        if self.record is not None and self.record.id == profile_id:
            return self.record
        return None

    async def get(self, profile_id: ProfileId) -> ProfileRecord | None:
        self._enter("get")
        return self._current(profile_id)

    async def upsert(self, record: ProfileRecord) -> None:
        self._enter("upsert")
        self.record = record
        self.notifier.publish(record.id)

    async def update_field(
        self, profile_id: ProfileId, field: ProfileField, value: str | None,
    ) -> int:
        self._enter("update_field")
        current = self._current(profile_id)
        if current is None:
            return 0
        self.record = replace(current, **{field.value: value})
        self.notifier.publish(profile_id)
        return 1

    async def exists(self, profile_id: ProfileId) -> bool:
        self._enter("exists")
        return self._current(profile_id) is not None

    async def delete(self, profile_id: ProfileId) -> int:
        self._enter("delete")
        if self._current(profile_id) is None:
            return 0
        self.record = None
        self.notifier.publish(profile_id)
        return 1

    async def change_stream(self, profile_id: ProfileId):
        queue = self.notifier.subscribe(profile_id)
        try:
            yield await self.get(profile_id)
            while True:
                await queue.get()
                yield await self.get(profile_id)
        finally:
            self.notifier.unsubscribe(profile_id, queue)


async def collect(states) -> list:
    """Drain a one-shot interactor into a list of states."""
    return [state async for state in states]
