"""Exit codes for CLI commands.

The numeric values are the process exit status and should remain stable:
- 0: Success
- 1: User error (spec content cannot be processed, bad arguments)
- 2: Environment error (git identity missing)
- 5: I/O error (spec file missing or unreadable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
