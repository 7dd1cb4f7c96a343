"""
Click-based CLI for polyhash.

Usage:
    from polyhash.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from ..core.exceptions import PolyhashException
from .context import PolyhashContext

# Version is loaded from package metadata
try:
    __version__ = version("polyhash")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="polyhash")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """polyhash - one interface for many hash algorithms

    \b
    Digests:
        polyhash digest FILE             JSON map of digests for a file
        polyhash generate FILE           Hex digest with one algorithm
        polyhash compare DIGEST FILE     Verify a digest

    \b
    Information:
        polyhash algorithms              List algorithm names
        polyhash config                  View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = PolyhashContext.create()
    except PolyhashException as e:
        raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "PolyhashContext",
    "__version__",
    "cli",
    "register_commands",
]
