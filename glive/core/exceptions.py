"""
Errors raised by glive.

Everything derives from GliveException. The CLI reports those as a one-line
"Error: ..." and exits with exit_code; anything else is a bug and keeps its
traceback.
"""

from __future__ import annotations


class GliveException(Exception):
    """
    Base exception for all glive errors.

    Attributes:
        message: Text shown to the user
        context: Values that identify the failing thing (path, key, command)
        exit_code: Process exit status when the CLI stops on this error
    """

    exit_code: int = 1

    def __init__(self, message: str, *, context: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigFileError(GliveException):
    """The config file holds a value of the wrong type."""

    def __init__(self, message: str, *, file_path: str | None = None) -> None:
        super().__init__(message, context={"file_path": file_path} if file_path else None)


class ConfigValidationError(GliveException, ValueError):
    """An unknown config key was asked for."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message, context={"key": key} if key else None)


class BuildAbortedError(GliveException):
    """
    The enclosing build was halted.

    Raised by the build handle's halt() and by steps that cannot continue.
    The CI job is expected to stop; nothing catches this below the CLI.
    """


class ProcessLaunchError(GliveException):
    """
    A child process could not be started at all.

    Covers a missing executable or a permission error, before any exit
    code exists.
    """

    def __init__(self, message: str, *, command: list[str] | None = None) -> None:
        super().__init__(message, context={"command": command[0]} if command else None)


class PackageListError(GliveException):
    """A dpkg package list is missing."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message, context={"path": path} if path else None)
