"""Profile Snapshots — tagged emissions of the observe stream.

Invariants:
    - ProfileEmpty means the row does not exist; ProfileFault means the read failed
    - A fault never ends the stream: observers keep receiving snapshots after it
"""

from dataclasses import dataclass

from birthday.core.errors import BirthdayError
from birthday.core.profile import Profile


@dataclass(frozen=True)
class ProfileValue:
    profile: Profile


@dataclass(frozen=True)
class ProfileEmpty:
    pass


@dataclass(frozen=True)
class ProfileFault:
    error: BirthdayError

    @property
    def reason(self) -> str:
        return self.error.message


ProfileSnapshot = ProfileValue | ProfileEmpty | ProfileFault
