"""Profile — the singleton baby profile and the display data derived from it.

Invariants:
    - id is always SINGLE_PROFILE_ID
    - Every field is optional: partial profiles are valid intermediate states
    - is_empty profiles are never persisted; only is_complete profiles yield DisplayData
"""

from dataclasses import dataclass
from datetime import date

from birthday.core.domain_types import (
    SINGLE_PROFILE_ID, AgeUnit, BirthdayTheme, ProfileId,
)


@dataclass(frozen=True)
class Profile:
    id: ProfileId = SINGLE_PROFILE_ID
    name: str | None = None
    birthday: date | None = None
    picture_uri: str | None = None

    @classmethod
    def create(
        cls,
        name: str | None = None,
        birthday: date | None = None,
        picture_uri: str | None = None,
    ) -> "Profile":
        return cls(
            id=SINGLE_PROFILE_ID, name=name,
            birthday=birthday, picture_uri=picture_uri,
        )

    @classmethod
    def with_name(cls, name: str) -> "Profile":
        return cls.create(name=name)

    @classmethod
    def with_birthday(cls, birthday: date) -> "Profile":
        return cls.create(birthday=birthday)

    @classmethod
    def with_picture(cls, picture_uri: str) -> "Profile":
        return cls.create(picture_uri=picture_uri)

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.birthday is None and self.picture_uri is None

    @property
    def is_complete(self) -> bool:
        return bool(self.name) and self.birthday is not None

    def missing_required(self) -> list[str]:
        """Fields that block display derivation, in declaration order."""
        missing = []
        if not self.name:
            missing.append("name")
        if self.birthday is None:
            missing.append("birthday")
        return missing


@dataclass(frozen=True)
class DisplayData:
    """Celebration screen data. Recomputed on every request, never cached."""
    name: str
    age_number: int
    age_unit: AgeUnit
    picture_uri: str | None
    theme: BirthdayTheme
