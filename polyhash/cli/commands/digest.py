"""
Native Click implementation of the digest command.

Usage: polyhash digest FILE [-a ALGORITHM ...]
"""

from __future__ import annotations

import io
import json
from typing import IO

import click

from ...hasher import Hash
from ...options import with_algorithm
from ..context import PolyhashContext
from ..decorators import handle_errors, pass_polyhash_context


def digest_report(data: bytes, algorithms: list[str]) -> dict[str, str]:
    """
    Hash the same bytes with several algorithms.

    Args:
        data: File contents
        algorithms: Registered algorithm names

    Returns:
        Dict of {algorithm: hex digest}
    """
    report = {}
    for name in algorithms:
        h = Hash(with_algorithm(name))
        report[name] = h.generate(io.BytesIO(data)).hex()
    return report


@click.command("digest")
@click.argument("file", type=click.File("rb"))
@click.option(
    "-a",
    "--algorithm",
    "algorithms",
    multiple=True,
    help="Algorithm to include (repeatable). Defaults to hash.report.",
)
@pass_polyhash_context
@handle_errors
def digest(ctx: PolyhashContext, file: IO[bytes], algorithms: tuple[str, ...]) -> None:
    """Print a JSON map of digests for FILE.

    The file is read once and hashed with every selected algorithm.

    \b
    Examples:

        polyhash digest data.bin

        polyhash digest -a sha256 -a blake3 data.bin
    """
    names = list(algorithms) or list(ctx.settings.hash.report)
    data = file.read()
    ctx.logger.debug("Digesting %d bytes with %s", len(data), ", ".join(names))
    click.echo(json.dumps(digest_report(data, names)))
