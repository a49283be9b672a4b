"""
Native Click implementation of the build command.

Usage: glive build [options]
"""

from pathlib import Path

import click

from ...core.container import resolve_or_default
from ...core.interfaces.launcher import ILauncher
from ...core.models.options import BuildOptions
from ...core.validation import validate_name
from ...presenters.console import ConsoleListener
from ...services.build import EnvironmentBuild
from ...services.grml_live import GrmlLiveBuilder
from ...services.launcher import SubprocessLauncher
from ..context import GliveContext
from ..decorators import pass_glive_context, report_errors


@click.command("build")
@click.option("-a", "--arch", "architecture", help="Target architecture (grml-live -a)")
@click.option("-c", "--classes", help="Comma-separated FAI classes (grml-live -c)")
@click.option("-s", "--suite", help="Debian suite (grml-live -s)")
@click.option(
    "-b", "--build-only", is_flag=True, default=None, help="Skip FAI, only build (grml-live -b)"
)
@click.option("-e", "--extract-iso", help="Extract this ISO instead of building (grml-live -e)")
@click.option("-o", "--output-directory", help="Output directory [default: $WORKSPACE]")
@click.option("-V", "--version", "version", help="Image version [default: build$BUILD_NUMBER]")
@click.option(
    "--version-from-date",
    is_flag=True,
    default=None,
    help="Use today's date as version when no version is given",
)
@click.option("-r", "--codename", help="Release name [default: autobuild-<version>]")
@click.option("-g", "--name", help="Grml name [default: autobuild]")
@click.option(
    "-w",
    "--workspace",
    type=click.Path(file_okay=False, path_type=Path),
    help="Build workspace [default: $WORKSPACE or current directory]",
)
@click.option("-n", "--dry-run", is_flag=True, help="Print the grml-live command, do not run it")
@pass_glive_context
@report_errors
def build(
    ctx: GliveContext,
    architecture: str | None,
    classes: str | None,
    suite: str | None,
    build_only: bool | None,
    extract_iso: str | None,
    output_directory: str | None,
    version: str | None,
    version_from_date: bool | None,
    codename: str | None,
    name: str | None,
    workspace: Path | None,
    dry_run: bool,
) -> None:
    """Build a Grml live image with grml-live.

    Options not given on the command line are taken from the [build]
    section of .glive/config.toml. The build fails when grml-live exits
    with a non-zero status.

    \b
    Examples:
        glive build -a amd64 -c GRMLBASE,GRML_FULL,AMD64 -s bookworm
        glive build --version-from-date -g grml-full
        glive build -n    # show the command only
    """
    listener = ConsoleListener()
    if ctx.config_error:
        listener.warning(ctx.config_error)

    options = BuildOptions.from_sources(
        defaults=ctx.section("build"),
        overrides={
            "architecture": architecture,
            "classes": classes,
            "suite": suite,
            "build_only": build_only,
            "extract_iso": extract_iso,
            "output_directory": output_directory,
            "version": version,
            "version_from_date": version_from_date,
            "codename": codename,
            "name": name,
        },
    )

    build_handle = EnvironmentBuild(workspace=workspace)
    step = GrmlLiveBuilder(options)
    step.prebuild(build_handle, listener)

    if step.options.name is not None:
        check = validate_name(step.options.name)
        for message in check.messages:
            listener.warning(message)

    launcher = resolve_or_default(ILauncher, SubprocessLauncher)  # type: ignore[type-abstract]
    step.perform(build_handle, launcher, listener, dry_run=dry_run)
