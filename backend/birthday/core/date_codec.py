"""Stored Date Codec — ISO-8601 (YYYY-MM-DD) conversion at the storage boundary.

Invariants:
    - parse_stored_date never raises: corruption is returned as DateParseFailure
    - None and blank strings parse to ParsedDate(None) (field absent, not corrupt)
    - Only the exact YYYY-MM-DD form is accepted; other ISO 8601 spellings
      (basic "20250115", week "2025-W03-1") are corruption
    - The caller decides how to log and coerce a failure
"""

import re
from dataclasses import dataclass
from datetime import date

STORED_DATE_FORMAT = "YYYY-MM-DD"
_STORED_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True)
class ParsedDate:
    value: date | None


@dataclass(frozen=True)
class DateParseFailure:
    raw: str
    reason: str


DateParseResult = ParsedDate | DateParseFailure


def format_stored_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def parse_stored_date(raw: str | None) -> DateParseResult:
    if raw is None or not raw.strip():
        return ParsedDate(None)
    value = raw.strip()
    if not _STORED_DATE_PATTERN.fullmatch(value):
        return _failure(raw, "wrong layout")
    try:
        return ParsedDate(date.fromisoformat(value))
    except ValueError as e:
        return _failure(raw, str(e))


def _failure(raw: str, detail: str) -> DateParseFailure:
    return DateParseFailure(
        raw=raw,
        reason=f"Invalid date format: '{raw}'. Expected format: {STORED_DATE_FORMAT} ({detail})",
    )
