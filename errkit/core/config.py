"""Typed configuration loading and access.

errkit reads an optional `errkit.toml`:

    [walker]
    max_depth = 256

    [render]
    indent = "   "
    connector = "└─ "

    [grouping]
    id_length = 6
    algorithm = "sha256"
    separator = "|"

Every key is optional; missing keys keep their defaults.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_raw_str, get_str, get_table

__all__ = [
    "Config",
    "WalkerConfig",
    "RenderConfig",
    "GroupingConfig",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_INDENT",
    "DEFAULT_CONNECTOR",
    "DEFAULT_ID_LENGTH",
    "DEFAULT_ALGORITHM",
    "DEFAULT_SEPARATOR",
]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_MAX_DEPTH = 256

DEFAULT_INDENT = "   "
DEFAULT_CONNECTOR = "└─ "

DEFAULT_ID_LENGTH = 6
DEFAULT_ALGORITHM = "sha256"
DEFAULT_SEPARATOR = "|"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class WalkerConfig:
    """Chain walking limits."""

    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Tree rendering glyphs."""

    indent: str = DEFAULT_INDENT
    connector: str = DEFAULT_CONNECTOR


@dataclass(frozen=True, slots=True)
class GroupingConfig:
    """Grouping ID derivation."""

    id_length: int = DEFAULT_ID_LENGTH
    algorithm: str = DEFAULT_ALGORITHM
    separator: str = DEFAULT_SEPARATOR


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    walker: WalkerConfig = field(default_factory=WalkerConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    grouping: GroupingConfig = field(default_factory=GroupingConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value is present but out of range.
        """
        walker: StrDict = get_table(data, "walker") or {}
        render: StrDict = get_table(data, "render") or {}
        grouping: StrDict = get_table(data, "grouping") or {}

        config = cls(
            walker=WalkerConfig(
                max_depth=_or_default(get_int(walker, "max_depth"), DEFAULT_MAX_DEPTH),
            ),
            render=RenderConfig(
                indent=_or_default(get_raw_str(render, "indent"), DEFAULT_INDENT),
                connector=_or_default(get_raw_str(render, "connector"), DEFAULT_CONNECTOR),
            ),
            grouping=GroupingConfig(
                id_length=_or_default(get_int(grouping, "id_length"), DEFAULT_ID_LENGTH),
                algorithm=(get_str(grouping, "algorithm") or DEFAULT_ALGORITHM).lower(),
                separator=_or_default(get_raw_str(grouping, "separator"), DEFAULT_SEPARATOR),
            ),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ValueError: On the first invalid value.
        """
        if self.walker.max_depth < 1:
            raise ValueError(f"walker.max_depth must be >= 1, got {self.walker.max_depth}")
        if not self.grouping.separator:
            raise ValueError("grouping.separator must not be empty")
        if self.grouping.algorithm not in hashlib.algorithms_available:
            raise ValueError(f"unknown hash algorithm: {self.grouping.algorithm}")
        digest_size = hashlib.new(self.grouping.algorithm).digest_size
        if digest_size == 0:
            raise ValueError(f"variable-length hash not supported: {self.grouping.algorithm}")
        if not 1 <= self.grouping.id_length <= digest_size * 2:
            raise ValueError(
                f"grouping.id_length must be between 1 and {digest_size * 2}, "
                f"got {self.grouping.id_length}"
            )


def _or_default[T](value: T | None, default: T) -> T:
    return default if value is None else value


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any failure."""
    return load_config(path).unwrap_or(Config())
