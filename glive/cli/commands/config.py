"""
Native Click implementation of the config command.

Usage: glive config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ...core.exceptions import ConfigValidationError


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .glive/config.toml (or [tool.glive] in
    pyproject.toml) and GLIVE_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        glive config list                # List all options

        glive config get build.suite     # Get the effective value
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
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
def config_get_cmd(key: str) -> None:
    """Get the effective value of a config key.

    Arguments:

        KEY    The config key to get (e.g. build.suite)
    """
    try:
        value = config_get(key)
    except ConfigValidationError as e:
        raise click.ClickException(e.message) from e

    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
