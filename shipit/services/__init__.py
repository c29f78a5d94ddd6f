"""Application services for the shipit CLI.

Services run external commands through a ``ProcessRunner`` and report
progress through a ``ConsoleProtocol``; the rules they apply live in
``shipit.release``.
"""

from shipit.services.cleanup import ImageCleanupService
from shipit.services.deploy import DeployService

__all__ = [
    "DeployService",
    "ImageCleanupService",
]
