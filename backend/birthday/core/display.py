"""Display Composer — derives celebration data from a complete profile.

Invariants:
    - compose is PURE given (profile, today, choose_theme)
    - Age is a calendar period: whole years == 0 → months, else years; days discarded
    - The theme is drawn on every call, never cached
"""

import random
from collections.abc import Callable
from datetime import date

from birthday.core.domain_types import AgeUnit, BirthdayTheme
from birthday.core.errors import IncompleteProfileError
from birthday.core.profile import DisplayData, Profile


def random_theme() -> BirthdayTheme:
    return random.choice(list(BirthdayTheme))


def whole_months_between(start: date, end: date) -> int:
    """Complete calendar months from start to end (0 when end precedes start)."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(months, 0)


def calculate_age(birthday: date, today: date) -> tuple[int, AgeUnit]:
    years, months = divmod(whole_months_between(birthday, today), 12)
    if years == 0:
        return months, AgeUnit.MONTHS
    return years, AgeUnit.YEARS


def compose(
    profile: Profile,
    today: date,
    choose_theme: Callable[[], BirthdayTheme] = random_theme,
) -> DisplayData:
    """Build DisplayData. Raises IncompleteProfileError without name + birthday."""
    if not profile.is_complete:
        raise IncompleteProfileError(profile.missing_required())
    number, unit = calculate_age(profile.birthday, today)
    return DisplayData(
        name=profile.name,
        age_number=number,
        age_unit=unit,
        picture_uri=profile.picture_uri,
        theme=choose_theme(),
    )
