"""Profile Stream — SSE feed of the observe interactor.

Invariants:
    - First event is always {"type": "loading"}; then one event per snapshot
    - Fault events use the error SSE envelope and the stream stays open
    - Client disconnect closes the observation (and its store subscription)
"""

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from birthday.api.dependencies import get_use_cases
from birthday.api.state_rendering import SSE_HEADERS, sse_line, state_event
from birthday.services.use_cases import ProfileUseCases

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/profile", tags=["profile"])


@router.get("/stream")
async def stream_profile(use_cases: ProfileUseCases = Depends(get_use_cases)):
    """Server-Sent Events: Loading, then the profile after every change."""

    async def event_generator():
        states = use_cases.observe_profile()
        try:
            async for state in states:
                yield sse_line(state_event(state))
        except asyncio.CancelledError:
            logger.info("Client disconnected from profile stream")
            raise
        finally:
            await states.aclose()

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
