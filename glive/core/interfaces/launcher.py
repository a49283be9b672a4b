"""
Process launch interface.

A launcher runs one external command to completion and reports its exit
code. Output is forwarded to caller-supplied text sinks as it is produced.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO


class ILauncher(ABC):
    """Interface for launching build commands."""

    @abstractmethod
    def launch(
        self,
        command: list[str],
        cwd: str | Path,
        stdout: TextIO,
        stderr: TextIO | None = None,
    ) -> int:
        """
        Run a command and wait for it to exit.

        Args:
            command: Argument vector, command name first
            cwd: Working directory for the child process
            stdout: Sink receiving the child's standard output
            stderr: Sink for standard error; None merges it into stdout

        Returns:
            The child's exit code

        Raises:
            ProcessLaunchError: If the command could not be started
        """
        pass
