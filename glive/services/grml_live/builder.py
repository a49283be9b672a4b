"""
grml-live build step.

Runs grml-live once for a build, using the options the step was configured
with, and fails the build when grml-live does.
"""

from __future__ import annotations

import shlex
from collections.abc import Callable
from datetime import date
from pathlib import Path

from ...core.exceptions import ProcessLaunchError
from ...core.interfaces.build import IBuild
from ...core.interfaces.launcher import ILauncher
from ...core.interfaces.listener import IBuildListener
from ...core.interfaces.logger import ILogger
from ...core.models.execution import ExecutionResult, StepState
from ...core.models.options import BuildOptions
from .command import build_command, resolve_fields

# Exit status reported when the command could not be started at all
LAUNCH_FAILURE_EXIT_CODE = 127


class GrmlLiveBuilder:
    """
    Build step wrapping grml-live.

    Handles:
    - Normalizing the configured options (once)
    - Resolving version, release name, build name and output directory
    - Running grml-live in the workspace with output streamed to the listener
    - Halting the build on a non-zero exit

    Usage:
        step = GrmlLiveBuilder(BuildOptions(suite="bookworm"))
        step.prebuild(build, listener)
        step.perform(build, launcher, listener)
    """

    DISPLAY_NAME = "grml-live"

    SUCCESS_MESSAGE = "Running grml-live was successful."
    FAILURE_MESSAGE = "Fatal error while running grml-live. :("
    HALT_MESSAGE = "Build failed."

    def __init__(
        self,
        options: BuildOptions,
        logger: ILogger | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the step.

        Args:
            options: Options as configured, possibly with blank strings
            logger: Logger for internal diagnostics
            today: Clock used for date-based versions
        """
        self._options = options
        self._normalized = False
        self._logger = logger
        self._today = today
        self.state = StepState.NOT_STARTED

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.container import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    @property
    def options(self) -> BuildOptions:
        return self._options

    def prebuild(self, build: IBuild, listener: IBuildListener) -> None:
        """Normalize options before the build runs."""
        self._normalize()

    def _normalize(self) -> None:
        if self._normalized:
            return
        self._options = self._options.normalize()
        self._normalized = True
        self.logger.debug("Normalized options: %s", self._options.model_dump(exclude_none=True))

    def command_for(self, build: IBuild) -> list[str]:
        """Build the grml-live command for this build."""
        self._normalize()
        workspace = build.env.get("WORKSPACE") or str(build.workspace)
        resolved = resolve_fields(self._options, build.env, workspace, self._today())
        return build_command(self._options, resolved)

    def perform(
        self,
        build: IBuild,
        launcher: ILauncher,
        listener: IBuildListener,
        dry_run: bool = False,
    ) -> ExecutionResult | None:
        """
        Run grml-live for the build.

        Args:
            build: Build providing environment, workspace and halt()
            launcher: Launcher that runs the command
            listener: Build log
            dry_run: Only report the command, do not run it

        Returns:
            ExecutionResult, or None for a dry run

        Raises:
            BuildAbortedError: From build.halt() when grml-live fails
        """
        command = self.command_for(build)
        listener.info(f"Running grml-live: {shlex.join(command)}")

        if dry_run:
            return None

        return self.execute(command, build.workspace.resolve(), launcher, listener, build)

    def execute(
        self,
        command: list[str],
        working_directory: Path,
        launcher: ILauncher,
        listener: IBuildListener,
        build: IBuild,
    ) -> ExecutionResult:
        """Run the command once and report the outcome."""
        self.state = StepState.RUNNING

        try:
            exit_code = launcher.launch(command, working_directory, listener.output)
            result = ExecutionResult(command=command, exit_code=exit_code)
        except ProcessLaunchError as e:
            self.logger.error("Launch failed: %s", e)
            listener.error(str(e))
            result = ExecutionResult(
                command=command, exit_code=LAUNCH_FAILURE_EXIT_CODE, launched=False
            )

        if result.succeeded:
            self.state = StepState.SUCCEEDED
            listener.info(self.SUCCESS_MESSAGE)
            return result

        self.state = StepState.FAILED
        listener.error(f"{self.FAILURE_MESSAGE} Exit code: {result.exit_code}")
        build.halt(self.HALT_MESSAGE)
        return result
