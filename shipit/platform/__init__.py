"""Platform layer: everything that touches the operating system."""

from .process import (
    ProcessError,
    ProcessRunner,
    ScriptedRunner,
    SubprocessRunner,
    run,
    run_silent,
)

__all__ = [
    "ProcessError",
    "ProcessRunner",
    "ScriptedRunner",
    "SubprocessRunner",
    "run",
    "run_silent",
]
