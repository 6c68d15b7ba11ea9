from dataclasses import dataclass, astuple
from pathlib import Path


@dataclass(frozen=True)
class PowerNames:
    """
    Well-known power profile entry names. Values are the average current in mA drawn by the
    subsystem. Profiles may define custom names besides these ones.
    """
    # No power consumption, or accounted for elsewhere
    NONE: str = 'none'

    # CPU
    CPU_IDLE: str = 'cpu.idle'  # Power collapse mode
    CPU_NORMAL: str = 'cpu.normal'
    CPU_FULL: str = 'cpu.full'

    # WiFi driver
    WIFI_SCAN: str = 'wifi.scan'  # Scanning for networks
    WIFI_ON: str = 'wifi.on'
    WIFI_ACTIVE: str = 'wifi.active'  # Transmitting/receiving

    GPS_ON: str = 'gps.on'

    # Bluetooth driver
    BLUETOOTH_ON: str = 'bluetooth.on'
    BLUETOOTH_ACTIVE: str = 'bluetooth.active'  # Transmitting/receiving

    # Screen on, not including the backlight
    SCREEN_ON: str = 'screen.on'
    # Full backlight brightness. At 50% brightness this should be multiplied by 0.5
    SCREEN_FULL: str = 'screen.full'

    # Cell radio on but not on a call
    RADIO_ON: str = 'radio.on'
    # Talking on the phone, usually leveled by signal strength
    RADIO_ACTIVE: str = 'radio.active'

    # Audio/video playback hardware (DSP, amplifier), on top of the CPU power
    AUDIO: str = 'dsp.audio'
    VIDEO: str = 'dsp.video'


@dataclass(frozen=True)
class ProfileTags:
    # XML grammar of a power profile document
    DEVICE: str = 'device'
    ITEM: str = 'item'
    ARRAY: str = 'array'
    ARRAY_ITEM: str = 'value'
    ATTR_NAME: str = 'name'


POWER: PowerNames = PowerNames()
TAGS: ProfileTags = ProfileTags()

KNOWN_POWER_NAMES: frozenset[str] = frozenset(astuple(POWER))

DEFAULT_PROFILE_FILE: Path = Path(__file__).resolve().parents[1] / 'profile' / 'data' / 'power_profile.xml'
