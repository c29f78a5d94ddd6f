from __future__ import annotations

from shipit.core.timing import elapsed, now
from shipit.output.console import ConsoleProtocol, Style
from shipit.platform.process import ProcessRunner, SubprocessRunner
from shipit.release.model import ReleaseConfig


class BaseService:
    """Shared wiring for release services: config, console and process runner."""

    def __init__(
        self,
        *,
        config: ReleaseConfig,
        console: ConsoleProtocol,
        runner: ProcessRunner | None = None,
    ) -> None:
        self._config = config
        self._console = console
        self._runner: ProcessRunner = runner or SubprocessRunner()

    def _step(self, message: str) -> None:
        self._console.step(message, elapsed(now(), self._config.started_at))

    def _echo(self, cmd: list[str]) -> None:
        self._console.print(" ".join(cmd), Style.DIM)
