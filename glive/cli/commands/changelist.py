"""
Native Click implementation of the changelist command.

Usage: glive changelist [options]
"""

from pathlib import Path

import click

from ...core.container import resolve_or_default
from ...core.interfaces.launcher import ILauncher
from ...core.models.changelist import ChangelistOptions
from ...presenters.console import ConsoleListener
from ...services.build import EnvironmentBuild
from ...services.changelist import ChangelistBuilder
from ...services.launcher import SubprocessLauncher
from ..context import GliveContext
from ..decorators import pass_glive_context, report_errors


@click.command("changelist")
@click.option("-f", "--output-filename", help="Changelog file name [default: changelog.txt]")
@click.option(
    "--dpkg-list-old-name", help="Previous package list in the workspace [default: dpkg.list.old]"
)
@click.option("-p", "--package-prefix", help="Name prefix of own packages")
@click.option("-u", "--git-url-base", help="Base URL of own package git repositories")
@click.option(
    "-w",
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    help="Build workspace [default: $WORKSPACE or current directory]",
)
@pass_glive_context
@report_errors
def changelist(
    ctx: GliveContext,
    output_filename: str | None,
    dpkg_list_old_name: str | None,
    package_prefix: str | None,
    git_url_base: str | None,
    workspace: Path | None,
) -> None:
    """Write a changelog between the last two image builds.

    Compares grml_logs/fai/dpkg.list in the workspace with the previous
    package list. Packages matching the prefix get their git history from
    <git-url-base>/<package>; all others are summarized.

    \b
    Examples:
        glive changelist -p grml -u https://github.com/grml
    """
    listener = ConsoleListener()
    if ctx.config_error:
        listener.warning(ctx.config_error)

    explicit = {
        "output_filename": output_filename,
        "dpkg_list_old_name": dpkg_list_old_name,
        "package_prefix": package_prefix,
        "git_url_base": git_url_base,
    }
    defaults = ctx.section("changelist")
    options = ChangelistOptions(
        **{key: value if value is not None else defaults.get(key) for key, value in explicit.items()}
    )

    build_handle = EnvironmentBuild(workspace=workspace)
    launcher = resolve_or_default(ILauncher, SubprocessLauncher)  # type: ignore[type-abstract]
    ChangelistBuilder(options).perform(build_handle, launcher, listener)
