"""
Click decorators for glive CLI commands.

- pass_glive_context: @click.pass_obj typed for GliveContext
- report_errors: turns glive exceptions into Click errors
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import GliveException

F = TypeVar("F", bound=Callable[..., Any])


def report_errors(f: F) -> F:
    """Decorator turning GliveException into click.ClickException.

    Click prints the message as "Error: ..." on stderr and exits with the
    exception's exit code, which is what a CI shell step needs to fail the
    build.

    Usage:
        @cli.command()
        @pass_glive_context
        @report_errors
        def build(ctx: GliveContext):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except GliveException as e:
            error = click.ClickException(str(e))
            error.exit_code = e.exit_code
            raise error from e

    return wrapper  # type: ignore[return-value]


def pass_glive_context(f: F) -> F:
    """Convenience decorator combining @click.pass_obj with type hints.

    Usage:
        @cli.command()
        @pass_glive_context
        def status(ctx: GliveContext):
            ...
    """
    return click.pass_obj(f)  # type: ignore[return-value]
