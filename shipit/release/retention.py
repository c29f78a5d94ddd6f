"""Keep the newest ``keep`` artifacts, hand back the rest for deletion.

Used for both Cloud Run revisions and image digests. Input order is the
listing's recency order (newest first) and is never changed.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["prune"]


def prune[T](items: Sequence[T], keep: int) -> list[T]:
    """Return the entries after the first ``keep``, in their original order.

    ``keep = 0`` selects everything.

    Raises:
        ValueError: If ``keep`` is negative.
    """
    if keep < 0:
        raise ValueError(f"keep must be >= 0, got {keep}")
    if len(items) <= keep:
        return []
    return list(items[keep:])
