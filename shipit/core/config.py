"""Typed loading of the optional ``shipit.toml`` workspace settings.

Settings supply defaults for the ``deploy`` options so a project can commit
its image name, services and region once. Command-line values always win.

Example ``shipit.toml``::

    image = "api"
    services = ["api-public", "api-worker"]
    project = "acme-prod"
    region = "europe-west1"
    keep_images = 5
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_str_list

__all__ = [
    "DEFAULT_KEEP_IMAGES",
    "DEFAULT_KEEP_REVISIONS",
    "SETTINGS_FILENAME",
    "ConfigError",
    "Settings",
    "load_settings",
    "load_settings_or_default",
]

SETTINGS_FILENAME = "shipit.toml"

DEFAULT_KEEP_IMAGES = 10
DEFAULT_KEEP_REVISIONS = 10


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the settings file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Values read from ``shipit.toml``. ``None`` means "not set"."""

    image: str | None = None
    services: tuple[str, ...] = ()
    project: str | None = None
    region: str | None = None
    registry_host: str | None = None
    lang: str | None = None
    keep_images: int | None = None
    keep_revisions: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from a mapping (parsed TOML)."""
        services: tuple[str, ...] = ()
        listed = get_str_list(data, "services")
        if listed is not None:
            services = tuple(listed)
        else:
            joined = get_str(data, "services")
            if joined is not None:
                services = tuple(s.strip() for s in joined.split(";") if s.strip())

        return cls(
            image=get_str(data, "image"),
            services=services,
            project=get_str(data, "project"),
            region=get_str(data, "region"),
            registry_host=get_str(data, "registry_host"),
            lang=get_str(data, "lang"),
            keep_images=get_int(data, "keep_images"),
            keep_revisions=get_int(data, "keep_revisions"),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Settings root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Settings file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading settings: {e}", path=path))


def load_settings(path: Path) -> Result[Settings, ConfigError]:
    """Load and parse settings from a TOML file.

    Args:
        path: Path to ``shipit.toml``

    Returns:
        Ok(Settings) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Settings.from_dict(result.value))


def load_settings_or_default(workspace: Path) -> Result[Settings, ConfigError]:
    """Load ``shipit.toml`` from ``workspace`` if present, else empty Settings.

    A missing file is not an error; a broken one is.
    """
    path = workspace / SETTINGS_FILENAME
    if not path.exists():
        return Ok(Settings())
    return load_settings(path)
