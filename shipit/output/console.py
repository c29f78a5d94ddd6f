"""Console output abstraction.

Services print through ``ConsoleProtocol`` so they never depend on rich
directly and tests can capture what an operator would have seen. Deploy tasks
run on worker threads, so every implementation serializes writes.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from shipit.core.timing import format_elapsed

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    DIM = auto()
    STEP = auto()  # Progress line with elapsed time

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def step(self, message: str, elapsed: float) -> None:
        """Print a progress line: ``<message> (<elapsed>s)``."""
        ...

    def error(self, message: str) -> None: ...


def step_line(message: str, elapsed: float) -> str:
    return f"{message} ({format_elapsed(elapsed)})"


class RichConsole:
    """Console implementation using the rich library."""

    def __init__(self, *, stderr: bool = False) -> None:
        from rich.console import Console
        from rich.markup import escape

        self._escape = escape
        self._console = Console(stderr=stderr, highlight=False)
        self._lock = threading.Lock()
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
            Style.STEP: "bold",
        }

    def _emit(self, message: str, style: str = "", *, markup: bool = True) -> None:
        with self._lock:
            if style:
                self._console.print(message, style=style, markup=markup)
            else:
                self._console.print(message, markup=markup)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._emit(message, self._style_map.get(style, ""), markup=False)

    def step(self, message: str, elapsed: float) -> None:
        self._emit(step_line(message, elapsed), self._style_map[Style.STEP], markup=False)

    def error(self, message: str) -> None:
        self._emit(f"[red bold]error:[/red bold] {self._escape(message)}")


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def _append(self, message: str, style: Style) -> None:
        with self._lock:
            self.outputs.append(OutputRecord(message, style))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._append(message, style)

    def step(self, message: str, elapsed: float) -> None:
        self._append(step_line(message, elapsed), Style.STEP)

    def error(self, message: str) -> None:
        self._append(f"error: {message}", Style.ERROR)

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def steps(self) -> list[str]:
        """Step lines with the trailing ``(N.Ns)`` removed."""
        return [o.message.rsplit(" (", 1)[0] for o in self.outputs if o.style == Style.STEP]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)
