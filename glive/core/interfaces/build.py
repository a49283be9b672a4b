"""
Build handle interface.

Gives a build step access to what the surrounding CI build provides: its
environment variables, its workspace, and a way to stop it.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path


class IBuild(ABC):
    """Interface for the build a step runs in."""

    @property
    @abstractmethod
    def env(self) -> Mapping[str, str]:
        """Environment variables of the build (WORKSPACE, BUILD_NUMBER, ...)."""
        pass

    @property
    @abstractmethod
    def workspace(self) -> Path:
        """Resolved workspace directory."""
        pass

    @abstractmethod
    def halt(self, message: str) -> None:
        """
        Mark the build as failed and stop it.

        Args:
            message: Reason shown to the user

        Raises:
            BuildAbortedError: Implementations stop the step by raising
        """
        pass
