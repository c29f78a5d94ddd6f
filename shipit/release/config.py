"""Turn command-line values plus ``shipit.toml`` into a ``ReleaseConfig``.

Command-line values win over settings, settings win over defaults. All
validation happens here, before anything runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shipit.core.config import DEFAULT_KEEP_IMAGES, DEFAULT_KEEP_REVISIONS, Settings
from shipit.core.result import Err, Ok, Result

from .build_tool import resolve_build_tool
from .errors import ConfigInvalid, UnsupportedBuildTool
from .model import ReleaseConfig

__all__ = [
    "ReleaseOptions",
    "build_release_config",
    "infer_registry_host",
    "split_services",
]


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    """Raw command-line values; ``None`` means the option was not given."""

    image: str | None = None
    services: str | None = None
    beta: bool = False
    keep_images: int | None = None
    keep_revisions: int | None = None
    project: str | None = None
    region: str | None = None
    registry_host: str | None = None
    lang: str | None = None


def split_services(raw: str) -> tuple[str, ...]:
    """Split ``a; b;;c`` into ``("a", "b", "c")``. Order is kept, duplicates too."""
    return tuple(part.strip() for part in raw.split(";") if part.strip())


def infer_registry_host(region: str) -> str:
    region = region.strip().lower()
    if region.startswith("asia"):
        return "asia.gcr.io"
    if region.startswith(("europe", "eu")):
        return "eu.gcr.io"
    if region.startswith("us"):
        return "us.gcr.io"
    return "gcr.io"


def _pick(option: str | None, setting: str | None) -> str:
    if option is not None and option.strip():
        return option.strip()
    return setting or ""


def _pick_int(option: int | None, setting: int | None, default: int) -> int:
    if option is not None:
        return option
    if setting is not None:
        return setting
    return default


def build_release_config(
    options: ReleaseOptions,
    settings: Settings,
    *,
    workspace: Path,
    started_at: float,
) -> Result[ReleaseConfig, ConfigInvalid | UnsupportedBuildTool]:
    image = _pick(options.image, settings.image)
    if not image:
        return Err(ConfigInvalid("--image is required"))

    if options.services is not None and options.services.strip():
        services = split_services(options.services)
    else:
        services = settings.services
    if not services:
        if options.services is None and not settings.services:
            return Err(ConfigInvalid("--svc is required"))
        return Err(ConfigInvalid("no services provided via --svc"))

    keep_images = _pick_int(options.keep_images, settings.keep_images, DEFAULT_KEEP_IMAGES)
    if keep_images < 1:
        return Err(ConfigInvalid("--keep-images must be >= 1"))

    keep_revisions = _pick_int(
        options.keep_revisions, settings.keep_revisions, DEFAULT_KEEP_REVISIONS
    )
    if keep_revisions < 1:
        return Err(ConfigInvalid("--keep-revisions must be >= 1"))

    project = _pick(options.project, settings.project)
    if not project:
        return Err(ConfigInvalid("--project is required"))

    region = _pick(options.region, settings.region)
    if not region:
        return Err(ConfigInvalid("--region is required"))

    if not workspace.is_dir():
        return Err(
            ConfigInvalid(
                f"workspace is not a directory: {workspace}",
                hint="Pass --workspace or run from the project root",
            )
        )

    tool = resolve_build_tool(_pick(options.lang, settings.lang), workspace)
    if isinstance(tool, Err):
        return tool

    registry_host = _pick(options.registry_host, settings.registry_host)
    if not registry_host:
        registry_host = infer_registry_host(region)

    return Ok(
        ReleaseConfig(
            image=image,
            beta=options.beta,
            services=services,
            build_tool=tool.value,
            registry_host=registry_host,
            project=project,
            region=region,
            workspace=workspace,
            keep_images=keep_images,
            keep_revisions=keep_revisions,
            started_at=started_at,
        )
    )
