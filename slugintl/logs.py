"""Contains logging related functionality."""

import logging
import logging.config
import typing
from pathlib import Path

import yaml

from slugintl.settings import settings


def init_logging(filepath: Path | None = None) -> dict[str, typing.Any]:
    """Read logging config yaml file from `filepath` and initialize logging by applying it globally.

    The library never configures handlers on import; applications that want its
    debug output call this once at startup.

    :param filepath: Path to the logging configuration yaml file. Defaults to `settings.logging_config_path`.
    :returns: The logging configuration as dict.
    """
    if filepath is None:
        filepath = settings.logging_config_path
    config: dict[str, typing.Any] = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    logging.config.dictConfig(config)
    return config
