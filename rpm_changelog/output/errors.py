"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rpm_changelog.core.config import ConfigError
from rpm_changelog.core.errors import ErrorCode
from rpm_changelog.output.console import Style
from rpm_changelog.spec.errors import (
    FieldNotFound,
    IdentityUnavailable,
    NoActiveDocument,
    NonIntegerRelease,
    SpecError,
)

if TYPE_CHECKING:
    from rpm_changelog.output.console import ConsoleProtocol

__all__ = ["print_error", "error_exit_code"]


def print_error(error: SpecError | ConfigError, console: ConsoleProtocol) -> None:
    """Print an error and its hint, if any."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def error_exit_code(error: SpecError | ConfigError) -> int:
    match error:
        case NoActiveDocument():
            return int(ErrorCode.IO_ERROR)
        case IdentityUnavailable():
            return int(ErrorCode.ENV_ERROR)
        case FieldNotFound() | NonIntegerRelease() | ConfigError():
            return int(ErrorCode.USER_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
