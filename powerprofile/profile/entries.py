""" Module for power profile entry definitions """
from powerprofile.common.profile_base_model import ProfileBaseModel


class ScalarEntry(ProfileBaseModel):
    """ Single average current value (mA) """
    value: float


class LeveledEntry(ProfileBaseModel):
    """ Average current values (mA) indexed by level, e.g. signal strength bars """
    values: tuple[float, ...] = ()

    @property
    def num_levels(self) -> int:
        return len(self.values)


PowerEntry = ScalarEntry | LeveledEntry
