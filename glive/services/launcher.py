"""
Local subprocess launcher.

Runs build commands as child processes of glive and forwards their output
line by line, so long grml-live runs show progress in the build log while
they happen.
"""

import shlex
import subprocess
import threading
from pathlib import Path
from typing import IO, TextIO

from ..core.exceptions import ProcessLaunchError
from ..core.interfaces.launcher import ILauncher
from ..core.interfaces.logger import ILogger


class SubprocessLauncher(ILauncher):
    """
    Launcher backed by subprocess.Popen.

    Usage:
        launcher = SubprocessLauncher()
        exit_code = launcher.launch(["make", "-j4"], cwd="/src", stdout=sys.stdout)
    """

    def __init__(self, logger: ILogger | None = None) -> None:
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ..core.container import resolve_or_default
            from .logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    def launch(
        self,
        command: list[str],
        cwd: str | Path,
        stdout: TextIO,
        stderr: TextIO | None = None,
    ) -> int:
        self.logger.debug("Launching in %s: %s", cwd, shlex.join(command))

        try:
            proc = subprocess.Popen(
                command,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if stderr is None else subprocess.PIPE,
                text=True,
                errors="replace",
                bufsize=1,
            )
        except OSError as e:
            message = f"Could not start {command[0]}: {e}"
            raise ProcessLaunchError(message, command=command) from e

        with proc:
            err_pump = None
            if stderr is not None:
                err_pump = threading.Thread(
                    target=_pump, args=(proc.stderr, stderr), daemon=True
                )
                err_pump.start()

            _pump(proc.stdout, stdout)

            if err_pump is not None:
                err_pump.join()
            exit_code = proc.wait()

        self.logger.debug("%s exited with code %d", command[0], exit_code)
        return exit_code


def _pump(source: IO[str] | None, sink: TextIO) -> None:
    """Copy lines from a child pipe to a sink until EOF."""
    if source is None:
        return
    for line in source:
        sink.write(line)
        sink.flush()
