"""
Changelist build step.

Writes a changelog describing how the package set of a freshly built image
differs from the previous build.
"""

from __future__ import annotations

from pathlib import Path

from ...core.exceptions import PackageListError
from ...core.interfaces.build import IBuild
from ...core.interfaces.launcher import ILauncher
from ...core.interfaces.listener import IBuildListener
from ...core.interfaces.logger import ILogger
from ...core.models.changelist import ChangelistOptions, PackageChanges
from .git_log import GitChangelog
from .packages import diff_packages, parse_package_list

SEP = "-" * 72 + "\n"

PACKAGE_LIST_PATH = Path("grml_logs") / "fai" / "dpkg.list"
MIRROR_DIR = "packages"


class ChangelistBuilder:
    """
    Build step generating a changelog between two image builds.

    The new package list comes from the grml-live logs in the workspace,
    the old one from a file a previous build left behind. Own packages get
    their git history; Debian packages are summarized.
    """

    DISPLAY_NAME = "grml-live: generate changelist"

    def __init__(self, options: ChangelistOptions, logger: ILogger | None = None) -> None:
        self._options = options
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.container import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    @property
    def options(self) -> ChangelistOptions:
        return self._options

    def perform(self, build: IBuild, launcher: ILauncher, listener: IBuildListener) -> Path:
        """
        Generate and write the changelog.

        Returns:
            Path of the written changelog file

        Raises:
            PackageListError: If the new package list does not exist
            BuildAbortedError: If collecting git history fails
        """
        workspace = build.workspace
        package_list = workspace / PACKAGE_LIST_PATH
        package_list_old = workspace / self._options.dpkg_list_old_name

        if not package_list.exists():
            raise PackageListError(
                f"Could not find package list: {package_list}", path=str(package_list)
            )

        packages = self._read_package_list(package_list, listener)
        try:
            packages_old = self._read_package_list(package_list_old, listener)
        except OSError as e:
            listener.info(f"Parsing old package list failed: {e}")
            packages_old = {}

        changes = diff_packages(packages_old, packages, self._options.package_prefix)
        self.logger.debug(
            "%d own package changes, %d Debian changes",
            len(changes.own),
            len(changes.debian_added) + len(changes.debian_changed) + len(changes.debian_removed),
        )

        git_changelog = GitChangelog(
            launcher, listener, workspace / MIRROR_DIR, self._options.git_url_base
        )
        text = render_changelog(
            changes,
            git_changelog,
            job_name=build.env.get("JOB_NAME", ""),
            build_id=build.env.get("BUILD_ID", ""),
        )

        changelog_file = workspace / self._options.output_filename
        listener.info(f"Writing changelog to {changelog_file}")
        changelog_file.write_text(text, encoding="utf-8")
        return changelog_file

    def _read_package_list(self, path: Path, listener: IBuildListener) -> dict[str, str]:
        listener.info(f"Parsing package list {path}")
        return parse_package_list(path.read_text(encoding="utf-8", errors="replace"))


def render_changelog(
    changes: PackageChanges,
    git_changelog: GitChangelog,
    job_name: str,
    build_id: str,
) -> str:
    """Render the changelog text, fetching git logs for changed own packages."""
    parts = [
        SEP,
        "Generated by glive changelist for job\n",
        f"{job_name} {build_id}\n",
        SEP,
    ]

    for change in changes.own:
        if change.removed:
            parts.append(f"\n{change.name}\nRemoved.\n{SEP}")
            continue
        revision_range = change.revision_range
        parts.append(f"\n{change.name} {revision_range}\nChanges:\n")
        parts.append(git_changelog.collect(change.name, revision_range))
        parts.append(SEP)

    parts.append("\nChanges to Debian package list:\n")
    parts.append(_summary_block("Added", changes.debian_added))
    parts.append(_summary_block("Changed", changes.debian_changed))
    parts.append(_summary_block("Removed", changes.debian_removed))
    parts.append(SEP)
    return "".join(parts)


def _summary_block(title: str, entries: list[str]) -> str:
    return f"  {title}:\n     " + "\n     ".join(entries).strip() + "\n"
