"""
Click-based CLI for glive.

This module provides the main Click command group and serves as the
entry point for the glive CLI.

Usage:
    from glive.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .. import __version__
from .context import GliveContext
from .decorators import report_errors


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="glive")
@click.pass_context
@report_errors
def cli(ctx: click.Context) -> None:
    """glive - grml-live build steps for CI jobs

    Builds Grml live images with grml-live and writes changelogs between
    builds. Build settings come from options, .glive/config.toml and the
    CI environment (WORKSPACE, BUILD_NUMBER, LOGNAME, ...).

    \b
    Build steps:
        glive build            Run grml-live for this build
        glive changelist       Write a changelog against the previous build

    \b
    Helpers:
        glive check-name NAME  Check a grml name
        glive config           View configuration
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = GliveContext.create()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "GliveContext",
    "cli",
    "register_commands",
]
