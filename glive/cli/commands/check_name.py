"""
Native Click implementation of the check-name command.

Usage: glive check-name NAME
"""

import click

from ...core.validation import validate_name


@click.command("check-name")
@click.argument("name", default="")
def check_name(name: str) -> None:
    """Check a grml name before using it with glive build -g.

    Exits with status 1 if the name is empty.
    """
    result = validate_name(name)
    if result.severity == "error":
        raise click.ClickException(" ".join(result.messages))
    if result.severity == "warning":
        for message in result.messages:
            click.echo(f"Warning: {message}", err=True)
        return
    click.echo(f"{name}: ok")
