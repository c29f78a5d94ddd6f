"""Result type for explicit error handling.

Every release stage returns ``Ok(value)`` or ``Err(error)`` instead of
raising, so the orchestrator decides which failures abort the run and which
are only collected.

Usage:
    match extract_digest(transcript):
        case Ok(digest):
            print(f"pushed {digest}")
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
