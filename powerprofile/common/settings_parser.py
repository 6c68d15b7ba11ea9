import logging
from pathlib import Path

import toml
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

logger: logging.Logger = logging.getLogger(__name__)


class ProfileBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(arbitrary_types_allowed=True,
                                      populate_by_name=True)

    @classmethod
    def from_toml(cls, config_file: str | Path):
        if isinstance(config_file, str):
            config_file = Path(config_file)

        if not config_file.exists() or not config_file.is_file():
            raise FileNotFoundError(f'File {config_file}')

        logger.debug(f'Loading settings from {config_file}')
        with config_file.open('r') as f:
            config_dict = toml.loads(f.read())
            return cls(**config_dict)

    @classmethod
    def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """
        Allow overwriting file defined settings with environmental variables
        """
        return env_settings, init_settings, dotenv_settings, file_secret_settings
