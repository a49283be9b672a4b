"""
Build listener interface.

The listener is the log of a single build execution: progress messages
from glive and the raw output of the commands it runs both end up there.
"""

from abc import ABC, abstractmethod
from typing import TextIO


class IBuildListener(ABC):
    """Interface for the per-build output channel."""

    @property
    @abstractmethod
    def output(self) -> TextIO:
        """Text stream that child process output is written to."""
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        """Report an informational message."""
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report a warning."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Report an error."""
        pass
