"""
Git history for the distribution's own packages.

Keeps a bare mirror of each package repository under the workspace and
reads one-line logs for a revision range from it.
"""

from __future__ import annotations

import io
from pathlib import Path

from ...core.exceptions import BuildAbortedError
from ...core.interfaces.launcher import ILauncher
from ...core.interfaces.listener import IBuildListener


class GitChangelog:
    """
    Collects `git log --oneline` output from mirrored package repos.

    Usage:
        changelog = GitChangelog(launcher, listener, workspace / "packages", base_url)
        text = changelog.collect("grml-scripts", "v1.0..v1.1")
    """

    def __init__(
        self,
        launcher: ILauncher,
        listener: IBuildListener,
        mirror_root: Path,
        git_url_base: str,
    ) -> None:
        self._launcher = launcher
        self._listener = listener
        self._mirror_root = mirror_root
        self._git_url_base = git_url_base

    def url_for(self, project: str) -> str:
        return f"{self._git_url_base}/{project}"

    def collect(self, project: str, revision_range: str) -> str:
        """
        Return the one-line log of a project for a revision range.

        Raises:
            BuildAbortedError: If any git command fails
        """
        self._listener.info(f"Building git changelog for {project} revisions {revision_range}")
        git_dir = self.update_mirror(project)

        captured = io.StringIO()
        self._run(["git", "log", "--oneline", revision_range], git_dir, stdout=captured)
        return captured.getvalue()

    def update_mirror(self, project: str) -> Path:
        """Clone the project mirror if missing and fetch the latest refs."""
        self._mirror_root.mkdir(parents=True, exist_ok=True)
        git_url = self.url_for(project)
        git_dir = self._mirror_root / f"{project}.git"

        if not git_dir.exists():
            self._listener.info(f"> Cloning git from {git_url}")
            self._run(["git", "clone", "--mirror", git_url], self._mirror_root)
        if not git_dir.exists():
            raise BuildAbortedError(
                f"Cloning from {git_url} into {git_dir} failed: output directory not found."
            )

        self._listener.info(f"> Updating git from {git_url}")
        self._run(["git", "remote", "set-url", "origin", git_url], git_dir)
        self._run(["git", "remote", "update", "--prune"], git_dir)
        return git_dir

    def _run(self, command: list[str], cwd: Path, stdout: io.StringIO | None = None) -> None:
        if stdout is None:
            exit_code = self._launcher.launch(command, cwd, self._listener.output)
        else:
            exit_code = self._launcher.launch(
                command, cwd, stdout, stderr=self._listener.output
            )
        if exit_code != 0:
            raise BuildAbortedError(
                f"Command exited with code: {exit_code}",
                context={"command": " ".join(command[:3])},
            )
