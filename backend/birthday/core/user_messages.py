"""User Messages — the only place errors become user-visible text.

Invariants:
    - Raw exception detail never appears in a returned message
    - Validation messages bypass this mapping (passed through verbatim by interactors)
"""

from birthday.core.errors import DatabaseError, ProfileNotFoundError

DATABASE_ERROR_MESSAGE = (
    "Something went wrong while accessing your baby's profile. Please try again."
)
NOT_FOUND_MESSAGE = "Baby profile not found"
UNKNOWN_ERROR_MESSAGE = "An unexpected error occurred"

NOTHING_TO_SAVE_MESSAGE = "At least one field must be provided"
BIRTHDAY_REQUIRED_MESSAGE = "Birthday must be provided"
NO_PROFILE_MESSAGE = "No baby profile found"
INCOMPLETE_PROFILE_MESSAGE = "Baby profile is incomplete. Name and birthday are required."


def to_user_message(error: BaseException | None) -> str:
    match error:
        case DatabaseError():
            return DATABASE_ERROR_MESSAGE
        case ProfileNotFoundError():
            return NOT_FOUND_MESSAGE
        case _:
            return UNKNOWN_ERROR_MESSAGE
