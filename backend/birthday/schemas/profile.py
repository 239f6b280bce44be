"""Profile Schemas — Pydantic models for the profile API boundary.

Invariants:
    - Schemas check types and coarse size limits only; business rules live in
      core/validator.py and are applied by the interactors
    - Responses are built from domain objects (never from ORM rows)
"""

from datetime import date

from pydantic import BaseModel, Field

from birthday.core.domain_types import AgeUnit, BirthdayTheme
from birthday.core.profile import DisplayData, Profile

_MAX_TEXT = 500
_MAX_URI = 2048


class ProfileSave(BaseModel):
    """Save any subset of the profile fields."""
    name: str | None = Field(None, max_length=_MAX_TEXT)
    birthday: date | None = None
    picture_uri: str | None = Field(None, max_length=_MAX_URI)


class NameUpdate(BaseModel):
    name: str = Field(max_length=_MAX_TEXT)


class BirthdayUpdate(BaseModel):
    birthday: date


class PictureUpdate(BaseModel):
    picture_uri: str = Field(max_length=_MAX_URI)


class NameDraft(BaseModel):
    """Live contents of the name input, fed to the auto-save coordinator."""
    value: str = Field("", max_length=_MAX_TEXT)


class ProfileResponse(BaseModel):
    id: int
    name: str | None
    birthday: date | None
    picture_uri: str | None

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            name=profile.name,
            birthday=profile.birthday,
            picture_uri=profile.picture_uri,
        )


class ExistsResponse(BaseModel):
    exists: bool


class DisplayDataResponse(BaseModel):
    name: str
    age_number: int
    age_unit: AgeUnit
    picture_uri: str | None
    theme: BirthdayTheme

    @classmethod
    def from_domain(cls, data: DisplayData) -> "DisplayDataResponse":
        return cls(
            name=data.name,
            age_number=data.age_number,
            age_unit=data.age_unit,
            picture_uri=data.picture_uri,
            theme=data.theme,
        )
