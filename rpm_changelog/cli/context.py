from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from rpm_changelog.core.config import DEFAULT_CONFIG_PATH, Config, load_config
from rpm_changelog.core.result import Err
from rpm_changelog.output.console import ConsoleProtocol, RichConsole
from rpm_changelog.output.errors import error_exit_code, print_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    cwd: Path


def build_context(config_path: Path | None = None, *, with_config: bool = True) -> CLIContext:
    """Load config and set up the console.

    An explicit ``--config`` must load; the default location is optional.
    Commands that never read config pass ``with_config=False`` so a broken
    config file cannot stop them.
    """
    console = RichConsole()
    config = Config()

    path = config_path or DEFAULT_CONFIG_PATH.expanduser()
    if with_config and (config_path is not None or path.is_file()):
        result = load_config(path)
        if isinstance(result, Err):
            print_error(result.error, console)
            raise typer.Exit(code=error_exit_code(result.error))
        config = result.value

    return CLIContext(config=config, console=console, cwd=Path.cwd())
