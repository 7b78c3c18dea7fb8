"""Configuration management for tik."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_FILE_NAME = ".tikdata"


def default_data_file() -> Path:
    """Data file in the user's home directory, or a relative path if there is none."""
    try:
        return Path.home() / DATA_FILE_NAME
    except (RuntimeError, KeyError) as e:
        logger.debug(f"Home directory unavailable, using ./{DATA_FILE_NAME}: {e}")
        return Path(DATA_FILE_NAME)


@dataclass
class Config:
    """tik configuration."""

    data_file: Path = field(default_factory=default_data_file)


def load_config() -> Config:
    """Build the configuration for this invocation."""
    return Config()
