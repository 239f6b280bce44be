"""Profile Routes — REST surface over the profile interactors.

Invariants:
    - Every route runs exactly one interactor (or feeds the auto-save coordinator)
    - Responses are built from the terminal state only; Error states raise their
      BirthdayError cause and the global handler renders it
    - Write routes return the profile as stored after the write

Design Decisions:
    - Singleton resource: no id in the path, the profile always has id 1
    - POST /name/draft answers 202 immediately; the commit happens after the quiet period
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from birthday.api.dependencies import get_use_cases
from birthday.api.state_rendering import profile_payload, render
from birthday.schemas.profile import (
    BirthdayUpdate, DisplayDataResponse, ExistsResponse, NameDraft,
    NameUpdate, PictureUpdate, ProfileResponse, ProfileSave,
)
from birthday.services.use_cases import ProfileUseCases

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/profile", tags=["profile"])


async def _current_profile(use_cases: ProfileUseCases) -> dict | None:
    return profile_payload(await render(use_cases.get_profile()))


@router.get("/", response_model=ProfileResponse | None)
async def get_profile(use_cases: ProfileUseCases = Depends(get_use_cases)):
    """Current profile, or null when none has been saved yet."""
    return await _current_profile(use_cases)


@router.put("/", response_model=ProfileResponse | None)
async def save_profile(
    body: ProfileSave, use_cases: ProfileUseCases = Depends(get_use_cases),
):
    """Save any subset of name / birthday / picture (update-or-create)."""
    await render(use_cases.save_profile(
        name=body.name, birthday=body.birthday, picture_uri=body.picture_uri,
    ))
    return await _current_profile(use_cases)


@router.patch("/name", response_model=ProfileResponse | None)
async def update_name(
    body: NameUpdate, use_cases: ProfileUseCases = Depends(get_use_cases),
):
    await render(use_cases.update_name(body.name))
    return await _current_profile(use_cases)


@router.patch("/birthday", response_model=ProfileResponse | None)
async def update_birthday(
    body: BirthdayUpdate, use_cases: ProfileUseCases = Depends(get_use_cases),
):
    await render(use_cases.update_birthday(body.birthday))
    return await _current_profile(use_cases)


@router.patch("/picture", response_model=ProfileResponse | None)
async def update_picture(
    body: PictureUpdate, use_cases: ProfileUseCases = Depends(get_use_cases),
):
    await render(use_cases.update_picture(body.picture_uri))
    return await _current_profile(use_cases)


@router.delete("/picture", response_model=ProfileResponse | None)
async def clear_picture(use_cases: ProfileUseCases = Depends(get_use_cases)):
    """Remove the picture reference; a missing profile is left missing."""
    await render(use_cases.clear_picture())
    return await _current_profile(use_cases)


@router.post("/name/draft", status_code=status.HTTP_202_ACCEPTED)
async def submit_name_draft(
    body: NameDraft, use_cases: ProfileUseCases = Depends(get_use_cases),
):
    """Feed one keystroke value to the auto-save coordinator."""
    use_cases.name_autosave.submit(body.value)
    return {"status": "accepted"}


@router.get("/exists", response_model=ExistsResponse)
async def profile_exists(use_cases: ProfileUseCases = Depends(get_use_cases)):
    return ExistsResponse(exists=await render(use_cases.profile_exists()))


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(use_cases: ProfileUseCases = Depends(get_use_cases)):
    await render(use_cases.delete_profile())
    logger.info("Profile deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/display", response_model=DisplayDataResponse)
async def display_data(use_cases: ProfileUseCases = Depends(get_use_cases)):
    """Celebration data: age value + unit and a freshly drawn theme."""
    return DisplayDataResponse.from_domain(await render(use_cases.display_data()))
