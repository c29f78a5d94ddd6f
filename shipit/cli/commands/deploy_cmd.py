"""Deploy command - build, push and roll out to every service."""

from __future__ import annotations

from pathlib import Path

import typer

from shipit.cli.commands._helpers import exit_on_error
from shipit.cli.context import build_context
from shipit.core.timing import elapsed, format_elapsed, now
from shipit.output.console import Style
from shipit.release.config import ReleaseOptions, build_release_config
from shipit.services.deploy import DeployService


def deploy(
    image: str | None = typer.Option(
        None, "--image", help="Docker image name (required)", show_default=False
    ),
    svc: str | None = typer.Option(
        None, "--svc", help="Semicolon separated Cloud Run services (required)", show_default=False
    ),
    beta: bool = typer.Option(False, "--beta", help="Use dev tag and skip image cleanup"),
    keep_images: int | None = typer.Option(
        None,
        "--keep-images",
        help="Number of Docker image digests to retain (>=1) [default: 10]",
        show_default=False,
    ),
    keep_revisions: int | None = typer.Option(
        None,
        "--keep-revisions",
        help="Number of Cloud Run revisions to retain (>=1) [default: 10]",
        show_default=False,
    ),
    project: str | None = typer.Option(
        None, "--project", help="GCP project to deploy to (required)", show_default=False
    ),
    region: str | None = typer.Option(
        None, "--region", help="Cloud Run region (required)", show_default=False
    ),
    registry_host: str | None = typer.Option(
        None,
        "--registry-host",
        help="Registry host (e.g. gcr.io, asia.gcr.io); inferred from --region if omitted",
        show_default=False,
    ),
    lang: str | None = typer.Option(
        None,
        "--lang",
        help="Build tool: pnpm, npm, yarn, go, rust (auto-detected if omitted)",
        show_default=False,
    ),
    workspace: Path | None = typer.Option(
        None, "--workspace", help="Project root (defaults to the current directory)"
    ),
) -> None:
    """Build the project, push the image and deploy it to every service."""
    started_at = now()
    ctx = build_context(workspace)

    options = ReleaseOptions(
        image=image,
        services=svc,
        beta=beta,
        keep_images=keep_images,
        keep_revisions=keep_revisions,
        project=project,
        region=region,
        registry_host=registry_host,
        lang=lang,
    )
    cfg = exit_on_error(
        build_release_config(
            options, ctx.settings, workspace=ctx.workspace, started_at=started_at
        ),
        ctx,
    )

    exit_on_error(DeployService(config=cfg, console=ctx.console).release(), ctx)
    ctx.console.print(
        f"Done in {format_elapsed(elapsed(now(), cfg.started_at))}", Style.SUCCESS
    )
