"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from shipit.core.result import Err, Result
from shipit.output.errors import print_release_error, release_error_exit_code
from shipit.release.errors import ReleaseError

if TYPE_CHECKING:
    from shipit.cli.context import CLIContext


def exit_on_error[T](result: Result[T, ReleaseError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code.

    Replaces the boilerplate:
        match result:
            case Err(e):
                print_release_error(e, ctx.err_console)
                raise typer.Exit(code=release_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_release_error(result.error, ctx.err_console)
        exit_with_code(release_error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)
