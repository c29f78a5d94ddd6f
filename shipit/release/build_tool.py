"""Pick the build tool for a workspace.

An explicit ``--lang`` goes through a fixed alias table. Without one, marker
files are probed in priority order; several may coexist (``pnpm-lock.yaml``
next to ``package.json``) and the first one checked wins. Detection never
fails: no signal means pnpm.
"""

from __future__ import annotations

from pathlib import Path

from shipit.core.result import Err, Ok, Result

from .errors import UnsupportedBuildTool
from .model import BuildTool

__all__ = [
    "ALIASES",
    "DEFAULT_BUILD_TOOL",
    "MARKERS",
    "build_command",
    "detect_build_tool",
    "resolve_build_tool",
]

DEFAULT_BUILD_TOOL = BuildTool.pnpm

ALIASES: dict[str, BuildTool] = {
    "npm": BuildTool.npm,
    "node": BuildTool.npm,
    "nodejs": BuildTool.npm,
    "ts": BuildTool.npm,
    "typescript": BuildTool.npm,
    "javascript": BuildTool.npm,
    "pnpm": BuildTool.pnpm,
    "yarn": BuildTool.yarn,
    "go": BuildTool.go,
    "golang": BuildTool.go,
    "rust": BuildTool.rust,
    "cargo": BuildTool.rust,
}

# Order matters.
MARKERS: tuple[tuple[str, BuildTool], ...] = (
    ("pnpm-lock.yaml", BuildTool.pnpm),
    ("yarn.lock", BuildTool.yarn),
    ("package-lock.json", BuildTool.npm),
    ("go.mod", BuildTool.go),
    ("Cargo.toml", BuildTool.rust),
)

_COMMANDS: dict[BuildTool, tuple[str, ...]] = {
    BuildTool.pnpm: ("pnpm", "run", "build"),
    BuildTool.npm: ("npm", "run", "build"),
    BuildTool.yarn: ("yarn", "build"),
    BuildTool.go: ("go", "build", "./..."),
    BuildTool.rust: ("cargo", "build", "--release"),
}


def build_command(tool: BuildTool) -> list[str]:
    return list(_COMMANDS[tool])


def detect_build_tool(workspace: Path) -> BuildTool:
    for marker, tool in MARKERS:
        if (workspace / marker).is_file():
            return tool
    # A bare package.json lands here too.
    return DEFAULT_BUILD_TOOL


def resolve_build_tool(
    requested: str | None, workspace: Path
) -> Result[BuildTool, UnsupportedBuildTool]:
    normalized = (requested or "").strip().lower()
    if not normalized:
        return Ok(detect_build_tool(workspace))

    tool = ALIASES.get(normalized)
    if tool is None:
        return Err(UnsupportedBuildTool(value=normalized))
    return Ok(tool)
