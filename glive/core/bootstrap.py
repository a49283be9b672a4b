"""
Application bootstrap for glive.

Fills the service container with the production services. Call once at
startup; later calls return the already configured container.
"""

from collections.abc import Mapping
from typing import Any

from .container import ServiceContainer, get_container
from .interfaces.launcher import ILauncher
from .interfaces.logger import ILogger

_initialized = False


def bootstrap(
    start_dir: str | None = None,
    logging_config: Mapping[str, Any] | None = None,
) -> ServiceContainer:
    """
    Register ILogger and ILauncher.

    Args:
        start_dir: Where to look for the config file when logging_config
            is not given
        logging_config: An already loaded [logging] section

    Returns:
        The global ServiceContainer
    """
    global _initialized

    container = get_container()
    if _initialized:
        return container

    from ..services.launcher import SubprocessLauncher
    from ..services.logging import GliveLogger

    def create_logger() -> ILogger:
        section = logging_config
        if section is None:
            from ..config import load_config

            section = load_config(start_dir=start_dir)["logging"]
        return GliveLogger(
            level=section["level"],
            console=section["console"],
            file=section["file"],
        )

    container.register(ILogger, create_logger)  # type: ignore[type-abstract]
    container.register(ILauncher, SubprocessLauncher)  # type: ignore[type-abstract]

    _initialized = True
    return container


def reset() -> None:
    """Forget all registrations (between tests)."""
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
