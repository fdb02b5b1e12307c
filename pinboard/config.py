"""Configuration — defaults, an optional YAML file, and environment overrides.

Precedence, lowest first: built-in defaults, ``.pinboard.yaml`` (or the file
passed explicitly), ``PINBOARD_*`` environment variables. The CLI applies
its own options on top.

Example ``.pinboard.yaml``::

    data_path: ~/.pinboard/pins.json
    assets_root: ~/projects/game
    extensions: [".prefab", ".asset"]
    log_level: INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import yaml

from pinboard.errors import ConfigError

CONFIG_FILE = ".pinboard.yaml"

ENV_DATA_PATH = "PINBOARD_DATA_PATH"
ENV_ASSETS_ROOT = "PINBOARD_ASSETS_ROOT"
ENV_LOG_LEVEL = "PINBOARD_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def default_data_path() -> Path:
    return Path.home() / ".pinboard" / "pins.json"


@dataclass
class PinboardConfig:
    """Resolved settings for one pinboard session."""

    data_path: Path = field(default_factory=default_data_path)
    assets_root: Path = field(default_factory=Path.cwd)
    extensions: list[str] = field(default_factory=lambda: [".prefab"])
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.data_path = Path(self.data_path).expanduser()
        self.assets_root = Path(self.assets_root).expanduser()
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PinboardConfig:
    """Build a config from a YAML file and the environment.

    Without ``path``, ``.pinboard.yaml`` in the current directory is used if
    it exists. An explicit ``path`` must exist.
    """
    if environ is None:
        environ = os.environ

    values: dict = {}
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        values.update(_read_yaml(config_path))
    elif Path(CONFIG_FILE).exists():
        values.update(_read_yaml(Path(CONFIG_FILE)))

    if environ.get(ENV_DATA_PATH):
        values["data_path"] = environ[ENV_DATA_PATH]
    if environ.get(ENV_ASSETS_ROOT):
        values["assets_root"] = environ[ENV_ASSETS_ROOT]
    if environ.get(ENV_LOG_LEVEL):
        values["log_level"] = environ[ENV_LOG_LEVEL]

    return PinboardConfig(**values)


def _read_yaml(path: Path) -> dict:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    known = {"data_path", "assets_root", "extensions", "log_level"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown settings {', '.join(unknown)}")

    extensions = data.get("extensions")
    if extensions is not None and not (
        isinstance(extensions, list) and all(isinstance(e, str) for e in extensions)
    ):
        raise ConfigError(f"{path}: extensions must be a list of strings")
    return {key: value for key, value in data.items() if value is not None}
