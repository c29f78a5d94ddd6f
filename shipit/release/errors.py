from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Stage = Literal["build", "containerize", "publish"]

ServiceStage = Literal[
    "list-revisions",
    "deploy",
    "update-traffic",
    "delete-revision",
    "internal",
]


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    reason: str
    hint: str | None = None

    @property
    def message(self) -> str:
        return self.reason


@dataclass(frozen=True, slots=True)
class UnsupportedBuildTool:
    value: str
    hint: str = "Use one of: pnpm, npm, yarn, go, rust"

    @property
    def message(self) -> str:
        return f"unsupported --lang value {self.value!r}"


@dataclass(frozen=True, slots=True)
class StageFailed:
    stage: Stage
    returncode: int
    output: str = ""

    @property
    def message(self) -> str:
        return f"{self.stage} failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class DigestNotFound:
    transcript: str

    @property
    def message(self) -> str:
        return "digest not found in push output"


@dataclass(frozen=True, slots=True)
class RevisionDeleteFailed:
    service: str
    revision: str
    returncode: int

    @property
    def message(self) -> str:
        return f"delete revision {self.revision}: exit {self.returncode}"


@dataclass(frozen=True, slots=True)
class ServiceDeployFailed:
    service: str
    stage: ServiceStage
    detail: str
    cause: RevisionDeleteFailed | None = None

    @property
    def message(self) -> str:
        return f"{self.service}: {self.stage} failed: {self.detail}"


@dataclass(frozen=True, slots=True)
class DeployFailures:
    failures: tuple[ServiceDeployFailed, ...]

    @property
    def services(self) -> tuple[str, ...]:
        return tuple(f.service for f in self.failures)

    @property
    def message(self) -> str:
        return "\n".join(f.message for f in self.failures)


@dataclass(frozen=True, slots=True)
class ImageTagListFailed:
    repository: str
    returncode: int
    output: str = ""

    @property
    def message(self) -> str:
        return f"list image tags for {self.repository}: exit {self.returncode}"


@dataclass(frozen=True, slots=True)
class ImageTagParseFailed:
    reason: str

    @property
    def message(self) -> str:
        return f"parse image tags json: {self.reason}"


@dataclass(frozen=True, slots=True)
class ImageDeleteFailed:
    reference: str
    returncode: int

    @property
    def message(self) -> str:
        return f"delete image {self.reference}: exit {self.returncode}"


CleanupError = ImageTagListFailed | ImageTagParseFailed | ImageDeleteFailed

ReleaseError = (
    ConfigInvalid
    | UnsupportedBuildTool
    | StageFailed
    | DigestNotFound
    | DeployFailures
    | ImageTagListFailed
    | ImageTagParseFailed
    | ImageDeleteFailed
)
