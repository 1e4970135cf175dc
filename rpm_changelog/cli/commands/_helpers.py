"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from rpm_changelog.core.result import Err, Result
from rpm_changelog.output.errors import error_exit_code, print_error
from rpm_changelog.spec.document import SpecDocument, load_document
from rpm_changelog.spec.errors import SpecError

if TYPE_CHECKING:
    from pathlib import Path

    from rpm_changelog.cli.context import CLIContext


T = TypeVar("T")


def unwrap_or_exit(result: Result[T, SpecError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the error and exit.

    Replaces the pattern:
        match result:
            case Err(e):
                print_error(e, ctx.console)
                raise typer.Exit(code=error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_error(result.error, ctx.console)
        raise typer.Exit(code=error_exit_code(result.error))
    return result.value


def open_document(path: Path, ctx: CLIContext) -> SpecDocument:
    return unwrap_or_exit(load_document(path), ctx)
