"""
Native Click implementations of the generate and compare commands.

Usage:
    polyhash generate [-a ALGORITHM] (FILE | --text TEXT)
    polyhash compare [-a ALGORITHM] DIGEST (FILE | --text TEXT)
"""

from __future__ import annotations

from typing import IO, Any

import click

from ...hasher import Hash
from ...options import with_algorithm
from ..context import PolyhashContext
from ..decorators import handle_errors, pass_polyhash_context

algorithm_option = click.option(
    "-a",
    "--algorithm",
    default=None,
    help="Algorithm name. Defaults to hash.algorithm.",
)
file_argument = click.argument("file", type=click.File("rb"), required=False)
text_option = click.option("--text", default=None, help="Hash this text instead of a file.")


def _build_hash(ctx: PolyhashContext, algorithm: str | None) -> Hash:
    name = algorithm or ctx.settings.hash.algorithm
    return Hash(with_algorithm(name), logger=ctx.logger)


def _select_input(file: IO[bytes] | None, text: str | None) -> Any:
    if (file is None) == (text is None):
        raise click.UsageError("Provide exactly one of FILE or --text.")
    return text if text is not None else file


@click.command("generate")
@algorithm_option
@text_option
@file_argument
@pass_polyhash_context
@handle_errors
def generate(
    ctx: PolyhashContext, algorithm: str | None, text: str | None, file: IO[bytes] | None
) -> None:
    """Print the hex digest of FILE or --text.

    \b
    Examples:

        polyhash generate -a sha256 data.bin

        polyhash generate --text hello
    """
    h = _build_hash(ctx, algorithm)
    click.echo(h.generate(_select_input(file, text)).hex())


@click.command("compare")
@algorithm_option
@text_option
@click.argument("digest")
@file_argument
@pass_polyhash_context
@handle_errors
def compare(
    ctx: PolyhashContext,
    algorithm: str | None,
    text: str | None,
    digest: str,
    file: IO[bytes] | None,
) -> None:
    """Check FILE or --text against a hex DIGEST.

    Prints OK on a match and exits with status 1 on a mismatch.
    """
    try:
        expected = bytes.fromhex(digest)
    except ValueError as e:
        raise click.BadParameter("DIGEST must be hexadecimal", param_hint="DIGEST") from e

    h = _build_hash(ctx, algorithm)
    h.compare(expected, _select_input(file, text))
    click.echo("OK")
