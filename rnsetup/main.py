"""
rn-setup — CLI entrypoint.

Usage:
    rnsetup
    rnsetup --dry-run --verbose
    python -m rnsetup --config rnsetup.yml
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from rnsetup import __version__
from rnsetup.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.command()
@click.version_option(version=__version__, prog_name="rnsetup")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to rnsetup.yml (default: $RNSETUP_CONFIG or ./rnsetup.yml).",
)
@click.option("--dry-run", is_flag=True, help="Show install commands without running them.")
@click.option("--mock", is_flag=True, help="Use the mock executor (no real execution).")
def cli(
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: Path | None,
    dry_run: bool,
    mock: bool,
) -> None:
    """React Native environment setup — install the toolchain on this machine.

    Checks for Git and Node.js, installs the React Native CLI, then runs
    the macOS, Linux or Windows specific setup.
    """
    from rnsetup.adapters.mock import MockExecutor
    from rnsetup.adapters.shell.command import ShellCommandExecutor
    from rnsetup.core.config.loader import load_config
    from rnsetup.core.errors import ConfigError
    from rnsetup.core.installer import Installer
    from rnsetup.ui.cli.console import ConsoleChannel

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )

    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    executor = MockExecutor() if mock else ShellCommandExecutor(dry_run=dry_run)

    with ConsoleChannel() as console:
        if mock:
            console.echo("[mock] no commands will be executed\n", fg="yellow")
        elif dry_run:
            console.echo("[dry-run] install commands will only be shown\n", fg="yellow")

        exit_code = Installer(executor, console, config).run()

    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
