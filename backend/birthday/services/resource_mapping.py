"""Resource Mapping — turns repository Outcomes into terminal interactor states.

Invariants:
    - Error states carry a mapped user message; the original error rides along as cause
    - Every mapped error is logged once, here
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from birthday.core.errors import BirthdayError, ProfileValidationError
from birthday.core.outcome import Outcome
from birthday.core.resource import Error, Resource, Success
from birthday.core.user_messages import to_user_message

logger = logging.getLogger(__name__)


def error_state(error: BaseException) -> Error:
    extra = {}
    if isinstance(error, BirthdayError):
        extra["error_code"] = error.code
        operation = getattr(error, "operation", None)
        if operation is not None:
            extra["operation"] = operation.value
    logger.warning(f"Profile operation failed: {error}", extra=extra)
    return Error(message=to_user_message(error), cause=error)


def rejected(message: str, field: str | None = None) -> Error:
    """Input rejected before any storage call; message is shown verbatim."""
    return Error(message=message, cause=ProfileValidationError(message, field))


def outcome_state(outcome: Outcome, data: Any = None) -> Error | Success:
    """Success(data) for a successful outcome, mapped Error otherwise."""
    if outcome.is_failure:
        return error_state(outcome.error)
    return Success(data)


async def terminal_state(states: AsyncIterator[Resource]) -> Resource:
    """Drain a one-shot interactor and return its last (terminal) state."""
    last: Resource | None = None
    async for state in states:
        last = state
    if last is None:
        raise RuntimeError("Interactor emitted no states")
    return last
