"""State Rendering — turns interactor state sequences into HTTP results and SSE lines.

Invariants:
    - One-shot routes render only the terminal state (Loading is never sent over REST)
    - An Error state is raised as its BirthdayError cause, carrying the state's
      user message, so the global handler picks the status code
    - SSE lines use the same envelope for every state: {"type": ..., "data": ...}
"""

import json
from collections.abc import AsyncIterator
from typing import Any

from birthday.core.errors import (
    BirthdayError, ErrorCategory, ErrorContext, ErrorSeverity,
)
from birthday.core.profile import Profile
from birthday.core.resource import Error, Loading, Resource, Success
from birthday.schemas.profile import ProfileResponse
from birthday.services.resource_mapping import terminal_state

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def error_for_state(state: Error) -> BirthdayError:
    """Exception to raise for an Error state; the user message wins over internals."""
    cause = state.cause
    if isinstance(cause, BirthdayError):
        cause.context.user_message = state.message
        return cause
    return BirthdayError(
        state.message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
        ErrorSeverity.CRITICAL, ErrorContext(user_message=state.message), 500,
    )


async def render(states: AsyncIterator[Resource]) -> Any:
    """Run a one-shot interactor; return its Success data or raise its error."""
    state = await terminal_state(states)
    match state:
        case Success(data=data):
            return data
        case Error() as error:
            raise error_for_state(error)
        case _:
            raise RuntimeError(f"Interactor ended in non-terminal state {state!r}")


def profile_payload(profile: Profile | None) -> dict | None:
    if profile is None:
        return None
    return ProfileResponse.from_domain(profile).model_dump(mode="json")


def state_event(state: Resource) -> dict:
    """SSE envelope for one observation state."""
    match state:
        case Loading():
            return {"type": "loading", "data": None}
        case Success(data=profile):
            return {"type": "profile", "data": profile_payload(profile)}
        case Error() as error:
            return error_for_state(error).to_sse_event()
    raise TypeError(f"Unknown state {state!r}")


def sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"
