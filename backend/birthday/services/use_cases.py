"""Use Case Registry — the interactors and coordinator built for one process.

Invariants:
    - Built once by the process root (lifespan) from an explicit repository handle
    - Every interactor shares the same repository (and thus the same store)
"""

from dataclasses import dataclass

from birthday.services.name_autosave import NameAutoSaveCoordinator
from birthday.services.profile_commands import (
    ClearProfilePicture, DeleteProfile, SaveProfile,
    UpdateProfileBirthday, UpdateProfileName, UpdateProfilePicture,
)
from birthday.services.profile_queries import (
    GetBirthdayDisplayData, GetProfile, ObserveProfile, ProfileExists,
)
from birthday.services.profile_repository import ProfileRepository


@dataclass
class ProfileUseCases:
    get_profile: GetProfile
    observe_profile: ObserveProfile
    profile_exists: ProfileExists
    display_data: GetBirthdayDisplayData
    save_profile: SaveProfile
    update_name: UpdateProfileName
    update_birthday: UpdateProfileBirthday
    update_picture: UpdateProfilePicture
    clear_picture: ClearProfilePicture
    delete_profile: DeleteProfile
    name_autosave: NameAutoSaveCoordinator

    @classmethod
    def build(
        cls, repository: ProfileRepository, autosave_quiet_period: float = 0.5,
    ) -> "ProfileUseCases":
        update_name = UpdateProfileName(repository)
        return cls(
            get_profile=GetProfile(repository),
            observe_profile=ObserveProfile(repository),
            profile_exists=ProfileExists(repository),
            display_data=GetBirthdayDisplayData(repository),
            save_profile=SaveProfile(repository),
            update_name=update_name,
            update_birthday=UpdateProfileBirthday(repository),
            update_picture=UpdateProfilePicture(repository),
            clear_picture=ClearProfilePicture(repository),
            delete_profile=DeleteProfile(repository),
            name_autosave=NameAutoSaveCoordinator(
                update_name, repository, quiet_period=autosave_quiet_period,
            ),
        )
