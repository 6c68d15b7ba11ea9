from powerprofile.profile.entries import PowerEntry, ScalarEntry, LeveledEntry
from powerprofile.profile.exceptions import ProfileConfigurationError
from powerprofile.profile.loader import ProfileLoader
from powerprofile.profile.power_map import PowerMap, SHARED_POWER_MAP
from powerprofile.profile.settings import ProfileSettings
from powerprofile.profile.store import ProfileStore

__all__ = [
    'PowerEntry',
    'ScalarEntry',
    'LeveledEntry',
    'ProfileConfigurationError',
    'ProfileLoader',
    'PowerMap',
    'SHARED_POWER_MAP',
    'ProfileSettings',
    'ProfileStore',
]
