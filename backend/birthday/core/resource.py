"""Resource States — what every interactor emits to its caller.

Invariants:
    - One-shot interactors emit Loading, then exactly one terminal state (Success | Error)
    - Error.message is user-facing; Error.cause is for logging only
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Loading:
    is_terminal = False


@dataclass(frozen=True)
class Success:
    data: Any = None
    is_terminal = True


@dataclass(frozen=True)
class Error:
    message: str
    cause: BaseException | None = None
    is_terminal = True


Resource = Loading | Success | Error
