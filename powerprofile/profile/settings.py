import logging
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import SettingsConfigDict

from powerprofile.common.constants import DEFAULT_PROFILE_FILE
from powerprofile.common.profile_logging import set_logging_configuration, recompute_profile_loggers, DEFAULT_LOG_PATH
from powerprofile.common.settings_parser import ProfileBaseSettings

_LOG_LEVELS: tuple[str, ...] = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ProfileSettings(ProfileBaseSettings):
    """
    Settings of the power profile. Every field can be overridden with a POWER_PROFILE_<FIELD> environment
    variable.

    Attributes:
        profile_file (Optional[Path]): Power profile XML document. The bundled default profile is used if unset.
        log_level (str): Log level name. Default value is "INFO".
        debug (bool): Log everything, also to the log files. Default value is False.
        log_path (Path): Directory of the log files.
        disable_file_logging (bool): Only log to the console. Default value is False.
    """
    model_config = SettingsConfigDict(env_prefix='POWER_PROFILE_',
                                      arbitrary_types_allowed=True,
                                      populate_by_name=True)

    profile_file: Optional[Path] = None
    log_level: str = 'INFO'
    debug: bool = False
    log_path: Path = DEFAULT_LOG_PATH
    disable_file_logging: bool = False

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f'Log level {v} not in {_LOG_LEVELS}')
        return level

    @property
    def document_file(self) -> Path:
        return self.profile_file if self.profile_file is not None else DEFAULT_PROFILE_FILE

    def configure_logging(self):
        set_logging_configuration(debug=self.debug,
                                  log_path=self.log_path,
                                  log_level=logging.getLevelName(self.log_level),
                                  disable_file_logging=self.disable_file_logging)
        recompute_profile_loggers()
