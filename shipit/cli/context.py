from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from shipit.core.config import Settings, load_settings_or_default
from shipit.core.errors import ErrorCode
from shipit.core.result import Err
from shipit.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Path
    settings: Settings
    console: ConsoleProtocol
    err_console: ConsoleProtocol


def resolve_workspace(workspace: Path | None) -> Path:
    if workspace is None:
        return Path.cwd()
    try:
        return workspace.expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --workspace: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def build_context(workspace: Path | None = None) -> CLIContext:
    root = resolve_workspace(workspace)
    if not root.is_dir():
        typer.echo(f"error: workspace '{root}' is not a directory", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    settings_result = load_settings_or_default(root)
    if isinstance(settings_result, Err):
        typer.echo(f"error: {settings_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        workspace=root,
        settings=settings_result.value,
        console=RichConsole(),
        err_console=RichConsole(stderr=True),
    )
