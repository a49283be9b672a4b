"""
grml-live command construction.

Turns normalized BuildOptions plus the build environment into the argument
vector for grml-live. The resulting command line has the shape:

    sudo -A grml-live -F -V -A [-a ARCH] [-c CLASSES] [-s SUITE] [-b]
        [-e ISO] [-U USER] -v VERSION -r RELEASE -g NAME -o OUTDIR

The order of the flags is fixed so generated command lines are easy to
compare between builds.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date

from ...core.models.options import BuildOptions, ResolvedFields

COMMAND_PREFIX = ("sudo", "-A", "grml-live", "-F", "-V", "-A")

DEFAULT_BUILD_NAME = "autobuild"

# Checked in order, first non-empty wins
USER_ENV_VARS = ("LOGNAME", "USER", "GRML_LIVE_USER")


def resolve_version(options: BuildOptions, build_number: str | None, current_date: date) -> str:
    """
    Pick the image version.

    Precedence: explicit version, then today's date as YYYYMMDD when
    version_from_date is set, then "build" + the CI build number.
    """
    if options.version is not None:
        return options.version
    if options.version_from_date:
        # strftime("%Y") does not pad years below 1000 on every platform
        return f"{current_date.year:04d}{current_date.month:02d}{current_date.day:02d}"
    return f"build{build_number or ''}"


def resolve_release_name(options: BuildOptions, version: str) -> str:
    """Codename if set, else autobuild-<version>."""
    if options.codename is not None:
        return options.codename
    return f"autobuild-{version}"


def resolve_build_name(options: BuildOptions) -> str:
    """Name if set, else autobuild."""
    if options.name is not None:
        return options.name
    return DEFAULT_BUILD_NAME


def resolve_output_directory(options: BuildOptions, workspace: str) -> str:
    """Output directory if set, else the build workspace."""
    if options.output_directory is not None:
        return options.output_directory
    return workspace


def resolve_invoking_user(env: Mapping[str, str]) -> str | None:
    """
    Find the user grml-live should chown its output to.

    Returns None when no candidate variable is set; grml-live then uses
    its own default and -U is left out.
    """
    for var in USER_ENV_VARS:
        value = env.get(var)
        if value:
            return value
    return None


def resolve_fields(
    options: BuildOptions,
    env: Mapping[str, str],
    workspace: str,
    current_date: date | None = None,
) -> ResolvedFields:
    """Resolve every derived value grml-live is always given."""
    version = resolve_version(options, env.get("BUILD_NUMBER"), current_date or date.today())
    return ResolvedFields(
        version=version,
        release_name=resolve_release_name(options, version),
        build_name=resolve_build_name(options),
        output_directory=resolve_output_directory(options, workspace),
        user=resolve_invoking_user(env),
    )


class CommandBuilder:
    """
    Appends grml-live tokens to a single ordered list.

    Usage:
        tokens = CommandBuilder().add("-a", "amd64").flag("-b").build()
    """

    def __init__(self, prefix: tuple[str, ...] = COMMAND_PREFIX) -> None:
        self._tokens: list[str] = list(prefix)

    def add(self, flag: str, value: str) -> CommandBuilder:
        """Append a flag followed by its value."""
        self._tokens.append(flag)
        self._tokens.append(value)
        return self

    def add_if(self, flag: str, value: str | None) -> CommandBuilder:
        """Append a flag and value only when the value is present."""
        if value is not None:
            self.add(flag, value)
        return self

    def flag(self, flag: str, enabled: bool | None = True) -> CommandBuilder:
        """Append a flag that takes no value, when enabled."""
        if enabled:
            self._tokens.append(flag)
        return self

    def build(self) -> list[str]:
        return list(self._tokens)


def build_command(options: BuildOptions, resolved: ResolvedFields) -> list[str]:
    """
    Assemble the grml-live argument vector.

    Args:
        options: Normalized build options
        resolved: Values from resolve_fields()

    Returns:
        Command tokens, starting with sudo
    """
    return (
        CommandBuilder()
        .add_if("-a", options.architecture)
        .add_if("-c", options.classes)
        .add_if("-s", options.suite)
        .flag("-b", options.build_only)
        .add_if("-e", options.extract_iso)
        .add_if("-U", resolved.user)
        .add("-v", resolved.version)
        .add("-r", resolved.release_name)
        .add("-g", resolved.build_name)
        .add("-o", resolved.output_directory)
        .build()
    )
