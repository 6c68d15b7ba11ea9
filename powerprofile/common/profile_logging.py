"""
Power profile logging

Logging is configured so by default logs go to console with the configured level. Warnings and errors are also
written to a rotating file per module, unless file logging is disabled.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Global logging settings. They should only be modified from set_logging_configuration.
# These settings won't affect already existing loggers
_DEBUG: bool = False
_LOG_LEVEL: int = logging.INFO
_DISABLE_FILE_LOGGING: bool = False

ROOT_LOGGER_NAME: str = 'powerprofile'

if os.getenv('TOX_TESTENV'):
    DEFAULT_LOG_PATH: Path = Path('/tmp/powerprofile/')
else:
    DEFAULT_LOG_PATH: Path = Path('/var/log/powerprofile')

_LOG_PATH: Path = DEFAULT_LOG_PATH

COMMON_LOG_FORMATTER: logging.Formatter = \
    logging.Formatter('[%(asctime)s - %(levelname)s - %(name)s/%(funcName)s]: %(message)s')


def set_logging_configuration(debug: bool,
                              log_path: str | Path = DEFAULT_LOG_PATH,
                              log_level: int | None = _LOG_LEVEL,
                              disable_file_logging: bool = _DISABLE_FILE_LOGGING) -> None:
    global _DEBUG, _LOG_LEVEL, _LOG_PATH, _DISABLE_FILE_LOGGING
    _DEBUG = debug
    _LOG_LEVEL = logging.INFO if log_level is None else log_level
    _DISABLE_FILE_LOGGING = disable_file_logging

    if isinstance(log_path, str):
        _LOG_PATH = Path(log_path)
    else:
        _LOG_PATH = log_path

    if not _DISABLE_FILE_LOGGING and not _LOG_PATH.exists():
        logging.warning(f"Configured logging path {log_path} doesn't exist, creating it.")
        try:
            _LOG_PATH.mkdir(parents=True, exist_ok=True)
        except OSError as ex:
            logging.warning(f'Cannot create logging path {_LOG_PATH}, file logging disabled: {ex}')
            _DISABLE_FILE_LOGGING = True


def __get_file_handler(filename: str) -> logging.FileHandler | None:
    """
    Creates a rotating file handler writing to '<_LOG_PATH>/<filename>.log'. Only warnings and above are written,
    unless debug is enabled, in which case the configured level applies.

    Args:
        filename (str): The name (without file extension) of the log file.

    Returns:
        The file handler, or None when the log directory cannot be written.
    """
    try:
        _LOG_PATH.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(_LOG_PATH/f"{filename}.log", maxBytes=5*1024*1024)
    except OSError as ex:
        logging.warning(f'Cannot write logs to {_LOG_PATH}, file logging disabled: {ex}')
        return None

    file_handler.setFormatter(COMMON_LOG_FORMATTER)
    file_handler.setLevel(logging.WARNING)

    if _DEBUG:
        file_handler.setLevel(_LOG_LEVEL)

    return file_handler


def __get_common_handler() -> logging.StreamHandler:
    stream_handler = logging.StreamHandler(stream=sys.stdout)

    stream_handler.setFormatter(COMMON_LOG_FORMATTER)
    stream_handler.setLevel(_LOG_LEVEL)

    if _DEBUG:
        stream_handler.setLevel(logging.DEBUG)

    return stream_handler


def __sanityze_logger_name(logger_name: str | None) -> tuple[str, str]:

    if logger_name is None:
        return ROOT_LOGGER_NAME, ROOT_LOGGER_NAME

    modules = logger_name.split('.')
    if len(modules) <= 1:
        return logger_name, logger_name

    match modules[-1]:
        case '__init__':
            module_name = modules[-2] + '_init'
        case '__main__':
            module_name = modules[-2] + '_main'
        case _:
            module_name = modules[-1]

    return '.'.join(modules), module_name


def get_profile_logger(name: str | None = None) -> logging.Logger:
    """
    Configures a logger for the power profile package. The logger name is expected to come from the module
    level variable `__name__`.
    Args:
        name: The name of the logger. If no name is provided, the package root logger is configured.

    Returns:
        A non-propagating logging.Logger with console and (optionally) file handlers.
    """
    package, module_name = __sanityze_logger_name(name)

    sub_logger = logging.getLogger(package)
    sub_logger.propagate = False
    sub_logger.setLevel(logging.DEBUG if _DEBUG else _LOG_LEVEL)

    # Reconfiguring an existing logger replaces its handlers
    for handler in list(sub_logger.handlers):
        sub_logger.removeHandler(handler)
        handler.close()

    sub_logger.addHandler(__get_common_handler())
    if not _DISABLE_FILE_LOGGING:
        file_handler = __get_file_handler(module_name)
        if file_handler is not None:
            sub_logger.addHandler(file_handler)

    return sub_logger


def recompute_profile_loggers():
    """ Applies the current logging configuration to the package loggers created so far """
    for k, v in list(logging.root.manager.loggerDict.items()):
        if isinstance(v, logging.Logger) and (k == ROOT_LOGGER_NAME or k.startswith(f'{ROOT_LOGGER_NAME}.')):
            get_profile_logger(k)
