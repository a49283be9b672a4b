"""
Build handle for steps run from a CI shell step.

The CI system exports its build variables into the environment and starts
glive inside the job workspace; this class exposes both to build steps.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ..core.exceptions import BuildAbortedError
from ..core.interfaces.build import IBuild


class EnvironmentBuild(IBuild):
    """
    IBuild backed by process environment variables.

    The workspace is, in order: an explicit path, $WORKSPACE, the current
    directory.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        workspace: str | Path | None = None,
    ) -> None:
        self._env = dict(os.environ if env is None else env)
        if workspace is None:
            workspace = self._env.get("WORKSPACE") or Path.cwd()
        self._workspace = Path(workspace)
        self.halted_with: str | None = None

    @property
    def env(self) -> Mapping[str, str]:
        return self._env

    @property
    def workspace(self) -> Path:
        return self._workspace

    def halt(self, message: str) -> None:
        self.halted_with = message
        raise BuildAbortedError(message)
