"""Parse ``gcloud run revisions list --format=value(metadata.name)`` output."""

from __future__ import annotations

__all__ = ["parse_revision_list"]


def parse_revision_list(output: str) -> list[str]:
    """One revision name per non-blank line, newest first as listed.

    Only the first column is used so a wider ``value(...)`` format still
    yields names.
    """
    revisions: list[str] = []
    for line in output.strip().splitlines():
        fields = line.split()
        if fields:
            revisions.append(fields[0])
    return revisions
