"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - ProfileStore speaks storage rows (ProfileRecord), never domain Profiles
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - Async in Protocol: every store call is a suspension point
"""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Protocol

from birthday.core.domain_types import ProfileField, ProfileId


@dataclass(frozen=True)
class ProfileRecord:
    """Storage row. birthday is the stored ISO string, unparsed."""
    id: ProfileId
    name: str | None = None
    birthday: str | None = None
    picture_uri: str | None = None


class ProfileStore(Protocol):
    """Contract for singleton profile persistence — implemented by shell."""
    async def get(self, profile_id: ProfileId) -> ProfileRecord | None: ...
    async def upsert(self, record: ProfileRecord) -> None: ...
    async def update_field(
        self, profile_id: ProfileId, field: ProfileField, value: str | None,
    ) -> int: ...
    async def exists(self, profile_id: ProfileId) -> bool: ...
    async def delete(self, profile_id: ProfileId) -> int: ...
    def change_stream(
        self, profile_id: ProfileId,
    ) -> AsyncIterator[ProfileRecord | None]: ...
