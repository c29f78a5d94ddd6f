"""Recover the pushed image digest from a ``docker push`` transcript.

A successful push ends with a line like::

    latest: digest: sha256:4c1a...9e size: 528
"""

from __future__ import annotations

from shipit.core.result import Err, Ok, Result

from .errors import DigestNotFound

__all__ = ["DIGEST_MARKER", "extract_digest"]

DIGEST_MARKER = "digest:"


def extract_digest(transcript: str) -> Result[str, DigestNotFound]:
    """First token after the first ``digest:`` marker wins."""
    for raw in transcript.splitlines():
        line = raw.strip()
        if DIGEST_MARKER not in line:
            continue
        _, _, rest = line.partition(DIGEST_MARKER)
        fields = rest.split()
        if not fields:
            continue
        return Ok(fields[0])
    return Err(DigestNotFound(transcript=transcript))
