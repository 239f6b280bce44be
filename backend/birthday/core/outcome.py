"""Outcome — success-or-error result returned by every repository operation.

Invariants:
    - Exactly one of (value, error) is meaningful: is_success iff error is None
    - error is always a BirthdayError (storage faults are wrapped before reaching here)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from birthday.core.errors import BirthdayError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: T | None = None
    error: BirthdayError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: T | None = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BirthdayError) -> "Outcome[T]":
        return cls(error=error)
