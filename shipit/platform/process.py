"""Subprocess execution with Result-based error handling.

Two flavours, matching how the release pipeline talks to external tools:

- ``run`` captures combined stdout/stderr (``docker push`` transcripts,
  ``gcloud ... list`` output that must be parsed afterwards).
- ``run_silent`` inherits the terminal so build and deploy output streams
  live to the operator.

Usage:
    result = run(["docker", "push", tag], cwd=workspace)
    match result:
        case Ok(transcript):
            ...
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import subprocess
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from shipit.core.result import Err, Ok, Result

__all__ = [
    "ProcessError",
    "ProcessRunner",
    "ScriptedRunner",
    "SubprocessRunner",
    "run",
    "run_silent",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code, or -1 if the process could not start.
        output: Combined output when captured, else empty.
    """

    command: tuple[str, ...]
    returncode: int
    output: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return its combined stdout/stderr.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(output) on success, Err(ProcessError) carrying the output on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, output=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, output=proc.stdout)
        )

    return Ok(proc.stdout)


def run_silent(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command with stdin/stdout/stderr inherited from this process.

    Returns:
        Ok(None) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, output=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)


class ProcessRunner(Protocol):
    """What services need from the outside world: run a command, one of two ways."""

    def capture(self, cmd: list[str], cwd: Path) -> Result[str, ProcessError]: ...

    def stream(self, cmd: list[str], cwd: Path) -> Result[None, ProcessError]: ...


class SubprocessRunner:
    """Production runner backed by ``run`` and ``run_silent``."""

    def __init__(self, env: dict[str, str] | None = None) -> None:
        self._env = env

    def capture(self, cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        return run(cmd, cwd=cwd, env=self._env)

    def stream(self, cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
        return run_silent(cmd, cwd=cwd, env=self._env)


@dataclass
class _Rule:
    prefix: tuple[str, ...]
    returncode: int
    output: str


@dataclass
class ScriptedRunner:
    """Runner that records commands and answers from a script, for tests.

    Rules match on a command prefix; the most recently added match wins.
    Unmatched commands succeed with empty output. Safe to call from several
    threads at once.
    """

    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)
    _rules: list[_Rule] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def on(self, *prefix: str, output: str = "", returncode: int = 0) -> ScriptedRunner:
        self._rules.append(_Rule(prefix=prefix, returncode=returncode, output=output))
        return self

    def _answer(self, mode: str, cmd: list[str]) -> _Rule | None:
        with self._lock:
            self.calls.append((mode, tuple(cmd)))
        for rule in reversed(self._rules):
            if tuple(cmd[: len(rule.prefix)]) == rule.prefix:
                return rule
        return None

    def capture(self, cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
        rule = self._answer("capture", cmd)
        if rule is None:
            return Ok("")
        if rule.returncode != 0:
            return Err(ProcessError(tuple(cmd), rule.returncode, rule.output))
        return Ok(rule.output)

    def stream(self, cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
        rule = self._answer("stream", cmd)
        if rule is not None and rule.returncode != 0:
            return Err(ProcessError(tuple(cmd), rule.returncode))
        return Ok(None)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [cmd for _, cmd in self.calls]

    def ran(self, *prefix: str) -> list[tuple[str, ...]]:
        """Commands that started with ``prefix``, in call order."""
        return [cmd for cmd in self.commands if cmd[: len(prefix)] == prefix]
