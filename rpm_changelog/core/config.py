"""Typed configuration loading.

The config file is optional. It lets a packager pin the changelog identity
instead of reading it from git, and set a default entry message:

    [identity]
    name = "Jane Doe"
    email = "jane@example.com"

    [changelog]
    message = "Rebuilt for new toolchain"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "Config",
    "ChangelogConfig",
    "ConfigError",
    "IdentityConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("~/.config/rpm-changelog/config.toml")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    @property
    def hint(self) -> str | None:
        if self.path is None:
            return None
        return f"Fix or remove {self.path}"


@dataclass(frozen=True, slots=True)
class IdentityConfig:
    """Packager identity override.

    Only used when both fields are set; otherwise git is asked.
    """

    name: str | None = None
    email: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.name and self.email)


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    identity: IdentityConfig = field(default_factory=IdentityConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        identity: StrDict = get_table(data, "identity") or {}
        changelog: StrDict = get_table(data, "changelog") or {}

        return cls(
            identity=IdentityConfig(
                name=get_str(identity, "name"),
                email=get_str(identity, "email"),
            ),
            changelog=ChangelogConfig(message=get_str(changelog, "message")),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))
