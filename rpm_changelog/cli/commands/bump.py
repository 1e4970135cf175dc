from __future__ import annotations

from pathlib import Path

import typer

from rpm_changelog.cli.commands._helpers import open_document, unwrap_or_exit
from rpm_changelog.cli.context import build_context
from rpm_changelog.services.bump import BumpService


def bump(
    spec_path: Path = typer.Argument(..., help="Path to the .spec file"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the new Release without saving."),
) -> None:
    """Increment the leading number of the Release tag."""
    ctx = build_context(with_config=False)
    document = open_document(spec_path, ctx)
    unwrap_or_exit(BumpService(console=ctx.console).bump(document, dry_run=dry_run), ctx)
