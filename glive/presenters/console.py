"""
Console listener for terminal build logs.

Implements the build listener on top of stdout/stderr, which is where a CI
system collects the console log of a shell build step.
"""

import sys
from typing import TextIO

from ..core.interfaces.listener import IBuildListener


class ConsoleListener(IBuildListener):
    """
    Console build listener.

    Progress messages and child process output share one stream so they
    stay in order in the build log; warnings and errors go to stderr.
    """

    def __init__(
        self,
        use_color: bool = True,
        file: TextIO | None = None,
        err_file: TextIO | None = None,
    ) -> None:
        """
        Initialize console listener.

        Args:
            use_color: Whether to use ANSI color codes
            file: Output stream (defaults to sys.stdout)
            err_file: Error stream (defaults to sys.stderr)
        """
        self._file = file or sys.stdout
        self._err_file = err_file or sys.stderr
        self._use_color = use_color and self._file.isatty()

    @property
    def output(self) -> TextIO:
        return self._file

    def info(self, message: str) -> None:
        print(message, file=self._file, flush=True)

    def warning(self, message: str) -> None:
        if self._use_color:
            print(f"\033[93mWarning: {message}\033[0m", file=self._err_file, flush=True)
        else:
            print(f"Warning: {message}", file=self._err_file, flush=True)

    def error(self, message: str) -> None:
        if self._use_color:
            print(f"\033[91mError: {message}\033[0m", file=self._err_file, flush=True)
        else:
            print(f"Error: {message}", file=self._err_file, flush=True)
