from __future__ import annotations

import typer

from shipit import __version__
from shipit.cli.commands.deploy_cmd import deploy
from shipit.cli.commands.detect_cmd import detect


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(deploy)
app.command()(detect)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
