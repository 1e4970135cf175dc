from __future__ import annotations

from pathlib import Path

import typer

from rpm_changelog.cli.commands._helpers import open_document, unwrap_or_exit
from rpm_changelog.cli.context import build_context
from rpm_changelog.git.identity import resolve_identity_provider
from rpm_changelog.services.changelog import ChangelogService


def changelog(
    spec_path: Path = typer.Argument(..., help="Path to the .spec file"),
    line: int | None = typer.Option(
        None,
        "--line",
        min=1,
        help="Insert at this line (1-based) instead of the top of %changelog.",
    ),
    column: int = typer.Option(0, "--column", min=0, help="Column for --line (0-based)."),
    message: str | None = typer.Option(
        None, "--message", "-m", help="Text for the first '- ' bullet."
    ),
    print_only: bool = typer.Option(
        False, "--print", help="Print the entry to stdout and leave the file untouched."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be added."),
    config_path: Path | None = typer.Option(None, "--config", help="Config file (TOML)."),
) -> None:
    """Generate a changelog entry from Version/Release/Epoch."""
    ctx = build_context(config_path)
    document = open_document(spec_path, ctx)

    service = ChangelogService(
        console=ctx.console,
        identity=resolve_identity_provider(ctx.config, ctx.cwd),
        message=message if message is not None else ctx.config.changelog.message,
    )

    if print_only:
        entry = unwrap_or_exit(service.entry(document), ctx)
        typer.echo(entry)
        return

    cursor = (line - 1, column) if line is not None else None
    unwrap_or_exit(service.insert(document, cursor=cursor, dry_run=dry_run), ctx)
