from __future__ import annotations

from pathlib import Path

import typer

from rpm_changelog.cli.commands._helpers import open_document
from rpm_changelog.cli.context import build_context
from rpm_changelog.spec.macros import build_macro_table, expand as expand_macros


def expand(
    spec_path: Path = typer.Argument(..., help="Path to the .spec file"),
    text: str = typer.Argument(..., help="Text to expand, e.g. '%{version}'"),
) -> None:
    """Expand %{name} references using the spec's %global/%define lines."""
    ctx = build_context(with_config=False)
    document = open_document(spec_path, ctx)
    typer.echo(expand_macros(build_macro_table(document.lines), text))
