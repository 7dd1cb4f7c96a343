"""
Native Click implementation of the config command.

Usage: polyhash config [list|get] [key]
"""

import click

from ...config import config_get, config_list


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .polyhash/config.toml, [tool.polyhash] in
    pyproject.toml, and POLYHASH_* environment variables.

    \b
    Examples:

        polyhash config list                 # List all options

        polyhash config get hash.algorithm   # Get a value
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    keys = config_list()
    click.echo("Available config options:")
    click.echo("")

    for key, info in keys.items():
        default = info["default"]
        if isinstance(default, list):
            default = ", ".join(default)
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {default}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(obj, key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. hash.algorithm)
    """
    start_dir = str(obj.cwd) if obj is not None else None
    value = config_get(key, start_dir=start_dir)
    if value is None:
        click.echo(f"{key}: (not set)")
    elif isinstance(value, list):
        click.echo(f"{key}: {', '.join(value)}")
    else:
        click.echo(f"{key}: {value}")
