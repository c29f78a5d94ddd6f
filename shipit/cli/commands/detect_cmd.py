"""Detect command - show which build tool a deploy would use."""

from __future__ import annotations

from pathlib import Path

import typer

from shipit.cli.commands._helpers import exit_on_error
from shipit.cli.context import build_context
from shipit.output.console import Style
from shipit.release.build_tool import build_command, resolve_build_tool


def detect(
    lang: str | None = typer.Option(
        None, "--lang", help="Resolve an explicit build tool name instead", show_default=False
    ),
    workspace: Path | None = typer.Option(
        None, "--workspace", help="Project root (defaults to the current directory)"
    ),
) -> None:
    """Print the build tool and command for the workspace."""
    ctx = build_context(workspace)
    tool = exit_on_error(resolve_build_tool(lang or ctx.settings.lang, ctx.workspace), ctx)
    ctx.console.print(str(tool))
    ctx.console.print(" ".join(build_command(tool)), Style.DIM)
