"""Error codes for CLI exit status.

Every fatal release condition maps to one of these codes so scripts driving
``shipit`` can tell a bad invocation from a failed rollout.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing option, unknown build tool)
    - 2: Environment error (workspace missing, unreadable settings)
    - 3: Build error (build, docker build, push, digest)
    - 6: Deploy error (one or more services failed)
    - 7: Cleanup error (image listing or deletion failed after deploy)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    DEPLOY_ERROR = 6
    CLEANUP_ERROR = 7
