from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

DEV_TAG = "dev"


class BuildTool(StrEnum):
    pnpm = "pnpm"
    npm = "npm"
    yarn = "yarn"
    go = "go"
    rust = "rust"


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Everything one run needs, fixed before the first command executes.

    ``started_at`` is a ``time.monotonic()`` reading; step lines report time
    relative to it.
    """

    image: str
    beta: bool
    services: tuple[str, ...]
    build_tool: BuildTool
    registry_host: str
    project: str
    region: str
    workspace: Path
    keep_images: int
    keep_revisions: int
    started_at: float

    @property
    def image_repo(self) -> str:
        return f"{self.registry_host}/{self.project}/{self.image}"

    @property
    def image_ref(self) -> ImageReference:
        return ImageReference(repository=self.image_repo)

    @property
    def image_tag(self) -> str:
        return self.image_ref.tag(beta=self.beta)


@dataclass(frozen=True, slots=True)
class ImageReference:
    """A repository path plus, once pushed, the content digest."""

    repository: str
    digest: str | None = None

    def tag(self, *, beta: bool) -> str:
        if beta:
            return f"{self.repository}:{DEV_TAG}"
        return self.repository

    def with_digest(self, digest: str) -> ImageReference:
        return ImageReference(repository=self.repository, digest=digest)

    def pinned(self) -> str:
        """``repo@digest``. Only valid after a successful push."""
        if not self.digest:
            raise ValueError(f"no digest known for {self.repository}")
        return f"{self.repository}@{self.digest}"


@dataclass(frozen=True, slots=True)
class ServiceDeployment:
    """One service's rollout: the pinned image and its pre-deploy revisions."""

    service: str
    image: str
    revisions: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ImageTagRecord:
    digest: str
