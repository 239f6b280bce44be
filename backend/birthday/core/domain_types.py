"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SINGLE_PROFILE_ID is the only profile identifier that ever exists
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProfileId = NewType("ProfileId", int)

SINGLE_PROFILE_ID = ProfileId(1)


# ─── Enums ───────────────────────────────────────────────────────

class ProfileField(str, Enum):
    """Persisted profile columns that accept partial updates."""
    NAME = "name"
    BIRTHDAY = "birthday"
    PICTURE_URI = "picture_uri"


class DataOperation(str, Enum):
    """Kind of storage operation, attached to DatabaseError."""
    RETRIEVE = "retrieve"
    UPDATE = "update"
    DELETE = "delete"


class AgeUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class BirthdayTheme(str, Enum):
    """Celebration themes. Display picks one uniformly at random."""
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
