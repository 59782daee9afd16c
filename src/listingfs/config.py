"""
Mount configuration, optionally read from a JSON file.
"""
import json
from typing import Optional

from serde import SerdeError, from_dict, serde

from .errors import ConfigError

DEFAULT_LISTING_FILE = "/dev/null"


@serde
class Config:
    listing_file: str = DEFAULT_LISTING_FILE
    mountpoint: str = ""
    # Trailing part of every file's content; the listing file path if unset
    content_label: Optional[str] = None
    foreground: bool = False
    nothreads: bool = False
    allow_other: bool = False
    debug: bool = False

    @property
    def label(self) -> str:
        return self.listing_file if self.content_label is None else self.content_label


def load_config(path: str) -> Config:
    """
    Read a configuration file. The file must hold a JSON object.

    Raises:
        ConfigError: if the file cannot be read or does not describe a Config
    """
    try:
        with open(path, "r") as f:
            data = json.loads(f.read())
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {path}: expected a JSON object")
    try:
        return from_dict(Config, data)
    except (SerdeError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
