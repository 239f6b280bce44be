"""Profile Validator — pure business-rule checks for profile fields.

Invariants:
    - Pure: no IO, deterministic given `today`
    - Name rules fire in order: blank, length, character class, consecutive spaces
    - validate_profile_data checks only supplied (non-None) fields, name → birthday → picture_uri
    - validate_picture_uri treats None/blank as a FAILURE; callers that allow
      "no picture" must filter before calling

Design Decisions:
    - ValidationResult over exceptions: validators are called on every keystroke-driven
      commit, and the message is passed verbatim to the client
"""

import re
from dataclasses import dataclass
from datetime import date


MIN_NAME_LENGTH: int = 1
MAX_NAME_LENGTH: int = 50

NAME_EMPTY = "Baby name cannot be empty"
NAME_TOO_SHORT = "Baby name is too short"
NAME_TOO_LONG = f"Baby name cannot exceed {MAX_NAME_LENGTH} characters"
NAME_INVALID_CHARACTERS = "Baby name can only contain letters and spaces"
NAME_CONSECUTIVE_SPACES = "Baby name cannot contain consecutive spaces"
BIRTHDAY_IN_FUTURE = "Baby's birthday cannot be in the future"
PICTURE_URI_MISSING = "Picture URI is null or blank"
PICTURE_URI_INVALID = "Invalid picture format"

_PICTURE_URI_PATTERN = re.compile(
    r"^(content://|file://|https?://|android\.resource://)", re.IGNORECASE,
)
_CONSECUTIVE_WHITESPACE = re.compile(r"\s{2,}")


@dataclass(frozen=True)
class ValidationResult:
    """Success when error_message is None."""
    error_message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.error_message is None

    @property
    def is_failure(self) -> bool:
        return self.error_message is not None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(error_message=message)


def _is_letters_and_spaces(value: str) -> bool:
    return all(ch.isalpha() or ch == " " for ch in value)


def validate_name(name: str | None) -> ValidationResult:
    trimmed = (name or "").strip()
    if not trimmed:
        return ValidationResult.failure(NAME_EMPTY)
    if len(trimmed) < MIN_NAME_LENGTH:
        return ValidationResult.failure(NAME_TOO_SHORT)
    if len(trimmed) > MAX_NAME_LENGTH:
        return ValidationResult.failure(NAME_TOO_LONG)
    if not _is_letters_and_spaces(trimmed):
        return ValidationResult.failure(NAME_INVALID_CHARACTERS)
    if _CONSECUTIVE_WHITESPACE.search(trimmed):
        return ValidationResult.failure(NAME_CONSECUTIVE_SPACES)
    return ValidationResult.success()


def validate_birthday(birthday: date, today: date | None = None) -> ValidationResult:
    """Fails iff birthday is strictly after today (local date at call time)."""
    today = today or date.today()
    if birthday > today:
        return ValidationResult.failure(BIRTHDAY_IN_FUTURE)
    return ValidationResult.success()


def validate_picture_uri(picture_uri: str | None) -> ValidationResult:
    trimmed = (picture_uri or "").strip()
    if not trimmed:
        return ValidationResult.failure(PICTURE_URI_MISSING)
    if not _PICTURE_URI_PATTERN.match(trimmed):
        return ValidationResult.failure(PICTURE_URI_INVALID)
    return ValidationResult.success()


def validate_profile_data(
    name: str | None = None,
    birthday: date | None = None,
    picture_uri: str | None = None,
    today: date | None = None,
) -> ValidationResult:
    """Validate only the supplied fields, stopping at the first failure."""
    if name is not None:
        result = validate_name(name)
        if result.is_failure:
            return result
    if birthday is not None:
        result = validate_birthday(birthday, today)
        if result.is_failure:
            return result
    if picture_uri is not None:
        result = validate_picture_uri(picture_uri)
        if result.is_failure:
            return result
    return ValidationResult.success()
