"""
Native Click implementation of the algorithms command.

Usage: polyhash algorithms
"""

import click

from ...hashing.registry import get_registry
from ..context import PolyhashContext
from ..decorators import pass_polyhash_context


@click.command("algorithms")
@pass_polyhash_context
def algorithms(ctx: PolyhashContext) -> None:
    """List registered algorithm names.

    The configured default is marked with '*'.
    """
    default = ctx.settings.hash.algorithm
    for name in get_registry().available_algorithms:
        marker = "*" if name == default else " "
        click.echo(f"{marker} {name}")
