"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shipit.core.errors import ErrorCode
from shipit.output.console import Style
from shipit.release.errors import (
    ConfigInvalid,
    DeployFailures,
    DigestNotFound,
    ImageDeleteFailed,
    ImageTagListFailed,
    ImageTagParseFailed,
    ReleaseError,
    StageFailed,
    UnsupportedBuildTool,
)

if TYPE_CHECKING:
    from shipit.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def _print_output(output: str, console: ConsoleProtocol) -> None:
    text = output.strip()
    if text:
        console.print(text, Style.DIM)


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error to the console with appropriate formatting."""
    match error:
        case ConfigInvalid(reason=reason, hint=hint):
            console.error(reason)
            if hint:
                console.print(f"hint: {hint}", Style.DIM)
        case UnsupportedBuildTool(hint=hint):
            console.error(error.message)
            console.print(f"hint: {hint}", Style.DIM)
        case StageFailed(output=output):
            console.error(error.message)
            _print_output(output, console)
        case DigestNotFound(transcript=transcript):
            console.error(error.message)
            _print_output(transcript, console)
        case DeployFailures(failures=failures):
            console.error(f"{len(failures)} service(s) failed to deploy")
            for failure in failures:
                console.print(failure.message)
        case ImageTagListFailed(output=output):
            console.error(error.message)
            _print_output(output, console)
        case ImageTagParseFailed() | ImageDeleteFailed():
            console.error(error.message)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get exit code for a release error."""
    match error:
        case ConfigInvalid() | UnsupportedBuildTool():
            return int(ErrorCode.USER_ERROR)
        case StageFailed() | DigestNotFound():
            return int(ErrorCode.BUILD_ERROR)
        case DeployFailures():
            return int(ErrorCode.DEPLOY_ERROR)
        case ImageTagListFailed() | ImageTagParseFailed() | ImageDeleteFailed():
            return int(ErrorCode.CLEANUP_ERROR)
