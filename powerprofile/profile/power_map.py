import logging
from threading import Lock
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from powerprofile.common.profile_logging import get_profile_logger
from powerprofile.profile.entries import PowerEntry

logger: logging.Logger = get_profile_logger(__name__)


class PowerMap:
    """
    Name to power entry table, populated at most once.

    Population is serialized behind a lock so concurrent first-time callers parse the document only once. The
    loaded table is published in a single assignment and never mutated afterwards, hence reads take no lock.
    """

    def __init__(self):
        self._populate_lock: Lock = Lock()
        self._entries: Mapping[str, PowerEntry] = MappingProxyType({})

    def populate_once(self, loader: Callable[[], Mapping[str, PowerEntry]]) -> bool:
        """
        Fills the map with the result of loader if it is still empty. If loader raises, the map stays empty and
        the exception propagates.

        Args:
            loader: callable producing the complete entry map

        Returns:
            True if this call populated the map, False if it was already populated
        """
        if self._entries:
            return False

        with self._populate_lock:
            if self._entries:
                return False

            entries = dict(loader())
            if not entries:
                logger.warning('Power profile loaded with no entries')
            self._entries = MappingProxyType(entries)
            return True

    def get(self, name: str) -> PowerEntry | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


# Process-wide power map shared by every ProfileStore that is not given its own
SHARED_POWER_MAP: PowerMap = PowerMap()
