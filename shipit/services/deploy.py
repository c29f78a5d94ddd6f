"""Release orchestration: build, containerize, publish, roll out, prune.

The main sequence is linear and stops at the first failure. After the push,
one task per service runs on a thread pool; every task is awaited and every
failure is reported together. Image cleanup runs last, and only for
non-beta releases whose rollout fully succeeded.

Per-service task:
    list revisions -> deploy pinned image -> move traffic -> delete old revisions

The revision list is captured before the deploy, so the new revision is not
part of it and ``keep_revisions`` old revisions survive next to it.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from shipit.core.result import Err, Ok, Result
from shipit.platform.process import ProcessError
from shipit.release.build_tool import build_command
from shipit.release.digest import extract_digest
from shipit.release.errors import (
    DeployFailures,
    DigestNotFound,
    ReleaseError,
    RevisionDeleteFailed,
    ServiceDeployFailed,
    ServiceStage,
    StageFailed,
)
from shipit.release.model import ImageReference, ServiceDeployment
from shipit.release.retention import prune
from shipit.release.revisions import parse_revision_list

from . import commands
from .base import BaseService
from .cleanup import ImageCleanupService


class DeployService(BaseService):
    """Runs one release end to end."""

    def release(self) -> Result[None, ReleaseError]:
        built = self.build()
        if isinstance(built, Err):
            return built

        image = self.containerize_and_publish()
        if isinstance(image, Err):
            return image

        self._step("Deploying...")
        rolled_out = self.deploy_all(image.value.pinned())
        if isinstance(rolled_out, Err):
            return rolled_out

        if self._config.beta:
            return Ok(None)

        self._step("Cleaning up image...")
        cleaned = ImageCleanupService(
            config=self._config, console=self._console, runner=self._runner
        ).cleanup()
        if isinstance(cleaned, Err):
            return cleaned
        return Ok(None)

    # -------------------------------------------------------------------------
    # Main sequence
    # -------------------------------------------------------------------------

    def build(self) -> Result[None, StageFailed]:
        cfg = self._config
        self._step(f"Building ({cfg.build_tool})...")
        cmd = build_command(cfg.build_tool)
        self._echo(cmd)
        result = self._runner.stream(cmd, cfg.workspace)
        if isinstance(result, Err):
            return Err(StageFailed(stage="build", returncode=result.error.returncode))
        return Ok(None)

    def containerize_and_publish(self) -> Result[ImageReference, StageFailed | DigestNotFound]:
        """Build and push the image, then pin it to the pushed digest."""
        cfg = self._config

        self._step("Building Docker...")
        cmd = commands.docker_build(cfg)
        self._echo(cmd)
        built = self._runner.stream(cmd, cfg.workspace)
        if isinstance(built, Err):
            return Err(StageFailed(stage="containerize", returncode=built.error.returncode))

        self._step("Uploading image...")
        cmd = commands.docker_push(cfg)
        self._echo(cmd)
        pushed = self._runner.capture(cmd, cfg.workspace)
        if isinstance(pushed, Err):
            return Err(
                StageFailed(
                    stage="publish",
                    returncode=pushed.error.returncode,
                    output=pushed.error.output,
                )
            )

        digest = extract_digest(pushed.value)
        if isinstance(digest, Err):
            return digest
        return Ok(cfg.image_ref.with_digest(digest.value))

    # -------------------------------------------------------------------------
    # Fan-out
    # -------------------------------------------------------------------------

    def deploy_all(self, image: str) -> Result[None, DeployFailures]:
        """Deploy ``image`` to every service concurrently and wait for all of them."""
        services = self._config.services
        if not services:
            return Ok(None)
        failures: list[ServiceDeployFailed] = []

        with ThreadPoolExecutor(max_workers=len(services)) as pool:
            futures: dict[Future[Result[ServiceDeployment, ServiceDeployFailed]], str] = {
                pool.submit(self.deploy_one, service, image): service for service in services
            }
            for future in as_completed(futures):
                service = futures[future]
                try:
                    result = future.result()
                except Exception as e:
                    result = Err(
                        ServiceDeployFailed(service=service, stage="internal", detail=str(e))
                    )
                if isinstance(result, Err):
                    failures.append(result.error)

        if failures:
            return Err(DeployFailures(failures=tuple(failures)))
        return Ok(None)

    def deploy_one(
        self, service: str, image: str
    ) -> Result[ServiceDeployment, ServiceDeployFailed]:
        cfg = self._config

        listed = self._runner.capture(commands.list_revisions(cfg, service), cfg.workspace)
        if isinstance(listed, Err):
            return Err(_failed(service, "list-revisions", listed.error))
        deployment = ServiceDeployment(
            service=service,
            image=image,
            revisions=tuple(parse_revision_list(listed.value)),
        )

        deployed = self._runner.stream(commands.deploy_service(cfg, service, image), cfg.workspace)
        if isinstance(deployed, Err):
            return Err(_failed(service, "deploy", deployed.error))

        self._step(f"Migrating {service}...")
        migrated = self._runner.stream(commands.update_traffic(cfg, service), cfg.workspace)
        if isinstance(migrated, Err):
            return Err(_failed(service, "update-traffic", migrated.error))
        self._step(f"Deployed {service}.")

        for revision in prune(deployment.revisions, cfg.keep_revisions):
            self._step(f"Deleting {revision}...")
            deleted = self._runner.stream(commands.delete_revision(cfg, revision), cfg.workspace)
            if isinstance(deleted, Err):
                cause = RevisionDeleteFailed(
                    service=service, revision=revision, returncode=deleted.error.returncode
                )
                return Err(
                    ServiceDeployFailed(
                        service=service,
                        stage="delete-revision",
                        detail=cause.message,
                        cause=cause,
                    )
                )
            self._step(f"Deleted {revision}.")

        return Ok(deployment)


def _failed(service: str, stage: ServiceStage, error: ProcessError) -> ServiceDeployFailed:
    return ServiceDeployFailed(service=service, stage=stage, detail=str(error))
