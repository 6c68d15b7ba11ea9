"""
Power profile store

Reports the average current (mA) drawn by device subsystems, as read from a power profile document. The
document is parsed once per power map, normally once per process, and shared by every store.
"""
import logging

from powerprofile.common.profile_logging import get_profile_logger
from powerprofile.profile.entries import ScalarEntry, LeveledEntry
from powerprofile.profile.loader import ProfileLoader, ProfileSource
from powerprofile.profile.power_map import PowerMap, SHARED_POWER_MAP
from powerprofile.profile.settings import ProfileSettings

logger: logging.Logger = get_profile_logger(__name__)


class ProfileStore:

    def __init__(self,
                 source: ProfileSource,
                 power_map: PowerMap | None = None,
                 loader: ProfileLoader | None = None):
        self.power_map: PowerMap = power_map if power_map is not None else SHARED_POWER_MAP
        self.loader: ProfileLoader = loader if loader is not None else ProfileLoader()

        if self.power_map.populate_once(lambda: self.loader.load_from(source)):
            logger.info(f'Power profile loaded from {source} with {len(self.power_map)} entries')
        else:
            logger.debug('Power profile already loaded, reusing it')

    @classmethod
    def from_settings(cls, settings: ProfileSettings, power_map: PowerMap | None = None) -> 'ProfileStore':
        return cls(settings.document_file, power_map=power_map)

    def get_average_power(self, name: str, level: int | None = None) -> float:
        """
        Returns the average current in mA consumed by the subsystem

        Args:
            name: the subsystem entry name, e.g. 'radio.active'
            level: the level at which the subsystem is running. For instance, the signal strength of the cell
             network between 0 and 4 (if there are 4 bars max.). Ignored if there is no data for multiple levels.
             Levels above the highest known one get the highest level value, negative levels get the first one.
             If not provided, the first level is used.

        Returns:
            The average current in milliAmps, 0.0 if the profile has no such entry
        """
        match self.power_map.get(name):
            case None:
                logger.debug(f'No power data for {name}')
                return 0.0
            case ScalarEntry(value=value):
                return value
            case LeveledEntry(values=values):
                if not values:
                    return 0.0
                if level is None or level < 0:
                    return values[0]
                if level < len(values):
                    return values[level]
                return values[-1]

    def get_num_levels(self, name: str) -> int:
        """ Number of levels for the entry: 1 for a single value, 0 if there is no such entry """
        match self.power_map.get(name):
            case None:
                return 0
            case ScalarEntry():
                return 1
            case LeveledEntry() as entry:
                return entry.num_levels
