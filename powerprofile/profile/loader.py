""" Power profile XML document loader """
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO
from xml.etree import ElementTree

from powerprofile.common.constants import TAGS, KNOWN_POWER_NAMES
from powerprofile.common.file_operations import unreadable_file_reason
from powerprofile.common.profile_logging import get_profile_logger
from powerprofile.profile.entries import PowerEntry, ScalarEntry, LeveledEntry
from powerprofile.profile.exceptions import ProfileConfigurationError

logger: logging.Logger = get_profile_logger(__name__)

ProfileSource = str | Path | bytes | BinaryIO


@dataclass(frozen=True)
class _Idle:
    """ Not accumulating any array """


@dataclass
class _InArray:
    """ Accumulating the values of an open array """
    name: str | None
    values: list[float] = field(default_factory=list)


_IDLE = _Idle()


class ProfileLoader:
    """
        Parses a power profile document into a flat map of entry name to power entry.

        Document example:

            <device name="Android">
                <item name="cpu.idle">2.5</item>
                <array name="radio.active">
                    <value>1.0</value>
                    <value>2.0</value>
                </array>
            </device>

        Arrays are closed by the first element that is not a value, or by the end of the document.
    """

    def parse(self, source: ProfileSource) -> ElementTree.Element:
        """
        Reads the document from a file path, raw bytes or a binary file object

        :param source: where the document comes from
        :return: root element of the document
        :raises ProfileConfigurationError: if the document cannot be read or is not well-formed
        """
        if source is None:
            raise ProfileConfigurationError(source, 'no document provided')

        if isinstance(source, (str, Path)):
            reason = unreadable_file_reason(source)
            if reason:
                raise ProfileConfigurationError(source, reason)

        try:
            if isinstance(source, bytes):
                return ElementTree.fromstring(source)
            return ElementTree.parse(source).getroot()
        except ElementTree.ParseError as ex:
            raise ProfileConfigurationError(source, f'malformed document ({ex})', ex) from ex
        except OSError as ex:
            raise ProfileConfigurationError(source, f'cannot read document ({ex})', ex) from ex

    def load_from(self, source: ProfileSource) -> dict[str, PowerEntry]:
        return self.load(self.parse(source))

    def load(self, document: ElementTree.Element | ElementTree.ElementTree) -> dict[str, PowerEntry]:
        """
        Walks the document elements in order and builds the power map. Later entries overwrite earlier ones
        with the same name.

        :param document: parsed document, rooted at a device element
        :return: entry name to power entry map
        :raises ProfileConfigurationError: if the root element is not a device element
        """
        root = document.getroot() if isinstance(document, ElementTree.ElementTree) else document
        if not isinstance(root, ElementTree.Element):
            raise ProfileConfigurationError(document, 'not an XML element tree')
        if root.tag != TAGS.DEVICE:
            raise ProfileConfigurationError(document, f"expected root element '{TAGS.DEVICE}', got '{root.tag}'")

        power_map: dict[str, PowerEntry] = {}
        state: _Idle | _InArray = _IDLE

        for element in root.iter():
            if element is root:
                continue

            if isinstance(state, _InArray) and element.tag != TAGS.ARRAY_ITEM:
                self.__flush_array(state, power_map)
                state = _IDLE

            match element.tag:
                case TAGS.ARRAY:
                    state = _InArray(name=element.get(TAGS.ATTR_NAME))
                case TAGS.ARRAY_ITEM:
                    if isinstance(state, _InArray):
                        value = self.__parse_value(element, state.name)
                        if value is not None:
                            state.values.append(value)
                    else:
                        logger.debug(f"Ignoring '{TAGS.ARRAY_ITEM}' element outside of an array")
                case TAGS.ITEM:
                    self.__store_item(element, power_map)
                case _:
                    logger.debug(f'Ignoring unknown element {element.tag}')

        if isinstance(state, _InArray):
            self.__flush_array(state, power_map)

        logger.debug(f'Loaded {len(power_map)} power profile entries')
        return power_map

    def __store_item(self, element: ElementTree.Element, power_map: dict[str, PowerEntry]):
        name = element.get(TAGS.ATTR_NAME)
        if name is None:
            logger.warning(f"Skipping '{TAGS.ITEM}' element without a name")
            return

        value = self.__parse_value(element, name)
        if value is not None:
            self.__put(name, ScalarEntry(value=value), power_map)

    def __flush_array(self, state: _InArray, power_map: dict[str, PowerEntry]):
        if state.name is None:
            logger.warning(f"Skipping '{TAGS.ARRAY}' element without a name")
            return
        self.__put(state.name, LeveledEntry(values=tuple(state.values)), power_map)

    @staticmethod
    def __put(name: str, entry: PowerEntry, power_map: dict[str, PowerEntry]):
        if name not in KNOWN_POWER_NAMES:
            logger.debug(f'Custom power profile entry {name}')
        power_map[name] = entry

    @staticmethod
    def __parse_value(element: ElementTree.Element, name: str | None) -> float | None:
        """
        Parses the decimal text of a leaf element. Malformed text counts as 0.0 so a single bad measurement does
        not invalidate the whole profile.

        :return: the parsed value, or None if the element has no text at all
        """
        if element.text is None:
            logger.debug(f"Element '{element.tag}' of {name} has no value")
            return None
        try:
            value = float(element.text)
        except ValueError:
            value = None

        # Plain decimal notation only: no digit separators, NaN or infinity
        if value is None or "_" in element.text or not math.isfinite(value):
            logger.warning(f"Malformed power value '{element.text}' for {name}, using 0.0")
            return 0.0
        return value
