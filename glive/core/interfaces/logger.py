"""
Logger interface for glive's own diagnostics.

What a build step reports to the user goes to IBuildListener and ends up in
the CI console log. ILogger is for glive itself: which config was read,
which command was launched, why a launch failed.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Printf-style diagnostics, as with stdlib logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any) -> None: ...
