"""
Click decorators for polyhash CLI commands.

- handle_errors: Turns PolyhashException into a ClickException
- pass_polyhash_context: Typed @click.pass_obj
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import PolyhashException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator that reports polyhash errors as CLI errors.

    The exception's exit_code becomes the process exit code. Other
    exceptions (I/O, image decoding) are reported the same way with
    exit code 1.

    Usage:
        @cli.command()
        @pass_polyhash_context
        @handle_errors
        def generate(ctx: PolyhashContext, ...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except PolyhashException as e:
            error = click.ClickException(str(e))
            error.exit_code = e.exit_code
            raise error from e
        except OSError as e:
            raise click.ClickException(str(e)) from e

    return wrapper  # type: ignore[return-value]


def pass_polyhash_context(f: F) -> F:
    """Convenience decorator combining @click.pass_obj with type hints.

    Usage:
        @cli.command()
        @pass_polyhash_context
        def digest(ctx: PolyhashContext):
            ...
    """
    return click.pass_obj(f)  # type: ignore[return-value]
