"""
Click context extension for glive CLI.

Provides GliveContext dataclass that holds glive-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class GliveContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup and passed to commands via Click's
    ctx.obj mechanism.

    Attributes:
        cwd: Current working directory
        config: Loaded configuration dictionary
    """

    cwd: Path
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, cwd: Path | None = None) -> GliveContext:
        """Create a GliveContext for the current environment.

        Loads configuration found from the working directory upwards and
        bootstraps the service container with its [logging] section.

        Args:
            cwd: Working directory override (defaults to Path.cwd())

        Returns:
            Configured GliveContext instance

        Raises:
            ConfigFileError: If a config value has the wrong type
        """
        from ..config import load_config
        from ..core.bootstrap import bootstrap

        if cwd is None:
            cwd = Path.cwd()

        config = load_config(start_dir=str(cwd))
        bootstrap(start_dir=str(cwd), logging_config=config["logging"])

        return cls(cwd=cwd, config=config)

    def section(self, name: str) -> dict[str, Any]:
        """Get one config section, empty if absent."""
        return self.config.get(name) or {}

    @property
    def config_error(self) -> str | None:
        return self.config.get("_config_error")
