"""Prune old image digests from the registry after a release rollout.

Unlike the deploy fan-out this pass has no partial-failure tolerance: the
first failed deletion stops it. Services stay deployed either way.
"""

from __future__ import annotations

from shipit.core.result import Err, Ok, Result
from shipit.release.errors import (
    CleanupError,
    ImageDeleteFailed,
    ImageTagListFailed,
)
from shipit.release.image_tags import parse_image_tags
from shipit.release.retention import prune

from . import commands
from .base import BaseService


class ImageCleanupService(BaseService):
    def cleanup(self) -> Result[int, CleanupError]:
        """Delete digests beyond ``keep_images``. Returns how many were deleted."""
        cfg = self._config
        listed = self._runner.capture(commands.list_image_tags(cfg), cfg.workspace)
        if isinstance(listed, Err):
            return Err(
                ImageTagListFailed(
                    repository=cfg.image_repo,
                    returncode=listed.error.returncode,
                    output=listed.error.output,
                )
            )

        parsed = parse_image_tags(listed.value)
        if isinstance(parsed, Err):
            return parsed

        deleted = 0
        for record in prune(parsed.value, cfg.keep_images):
            if not record.digest:
                continue
            reference = f"{cfg.image_repo}@{record.digest}"
            self._step(f"Deleting {reference}...")
            result = self._runner.stream(commands.delete_image(reference), cfg.workspace)
            if isinstance(result, Err):
                failed = ImageDeleteFailed(reference=reference, returncode=result.error.returncode)
                return Err(failed)
            self._step(f"Deleted {reference}.")
            deleted += 1

        return Ok(deleted)
