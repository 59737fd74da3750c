"""Application configuration and game descriptions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

_REQUIRED_KEYS = ("textures_path", "shaders_path", "gamesdb_path")


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is incomplete."""


@dataclass(frozen=True)
class GameInfo:
    """A selectable game."""

    title: str
    alias: str
    texture_prefix: str


@dataclass(frozen=True)
class AppConfig:
    """Paths to the asset directories and the games database."""

    textures_path: str
    shaders_path: str
    gamesdb_path: str

    @classmethod
    def from_file(cls, path) -> "AppConfig":
        """Read a JSON configuration file; raises ConfigError on any problem."""
        try:
            with Path(path).open(encoding="utf-8") as stream:
                data = json.load(stream)
        except OSError as exc:
            raise ConfigError(f"Failed to load config file: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Configuration file {path} is not valid JSON: {exc}") from exc

        values = {}
        for key in _REQUIRED_KEYS:
            if not isinstance(data, dict) or key not in data:
                raise ConfigError(
                    f"Configuration file {path} is missing required key: '{key}'"
                )
            value = data[key]
            if not isinstance(value, str):
                raise ConfigError(f"Configuration file {path} key '{key}' must be a string")
            values[key] = value
        return cls(**values)