"""Argument vectors for the docker and gcloud calls the release makes.

Kept apart from the services so tests can assert exact command lines.
"""

from __future__ import annotations

from shipit.release.model import ReleaseConfig

DOCKER_PLATFORM = "linux/amd64"


def docker_build(cfg: ReleaseConfig) -> list[str]:
    return ["docker", "build", "--platform", DOCKER_PLATFORM, "-t", cfg.image_tag, "."]


def docker_push(cfg: ReleaseConfig) -> list[str]:
    return ["docker", "push", cfg.image_tag]


def list_revisions(cfg: ReleaseConfig, service: str) -> list[str]:
    return [
        "gcloud",
        "run",
        "revisions",
        "list",
        f"--region={cfg.region}",
        f"--service={service}",
        "--format=value(metadata.name)",
    ]


def deploy_service(cfg: ReleaseConfig, service: str, image: str) -> list[str]:
    return [
        "gcloud",
        "run",
        "deploy",
        service,
        f"--image={image}",
        "--platform=managed",
        f"--region={cfg.region}",
        f"--project={cfg.project}",
    ]


def update_traffic(cfg: ReleaseConfig, service: str) -> list[str]:
    return [
        "gcloud",
        "run",
        "services",
        "update-traffic",
        service,
        "--to-latest",
        f"--region={cfg.region}",
    ]


def delete_revision(cfg: ReleaseConfig, revision: str) -> list[str]:
    return ["gcloud", "run", "revisions", "delete", revision, f"--region={cfg.region}", "-q"]


def list_image_tags(cfg: ReleaseConfig) -> list[str]:
    return ["gcloud", "container", "images", "list-tags", cfg.image_repo, "--format=json"]


def delete_image(reference: str) -> list[str]:
    return ["gcloud", "container", "images", "delete", reference, "--force-delete-tags", "-q"]
