from __future__ import annotations

import typer

from rpm_changelog import __version__
from rpm_changelog.cli.commands.bump import bump
from rpm_changelog.cli.commands.changelog import changelog
from rpm_changelog.cli.commands.expand import expand


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(changelog)
app.command()(bump)
app.command()(expand)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Changelog entries and release bumps for RPM spec files."""


def main() -> None:
    app()
