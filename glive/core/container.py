"""
Service registry for glive.

Commands and build steps look up their collaborators (ILogger, ILauncher)
here instead of constructing them, which is how tests put a fake launcher
under a real `glive build`. The registry is process-global; bootstrap()
fills it, reset() empties it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps an interface type to a dependency-injector provider."""

    _current: ClassVar[ServiceContainer | None] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def current(cls) -> ServiceContainer:
        if cls._current is None:
            cls._current = cls()
        return cls._current

    @classmethod
    def reset(cls) -> None:
        cls._current = None

    def register(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Build the service on first lookup and share it afterwards."""
        self._providers[interface] = providers.Singleton(factory)

    def provide(self, interface: type[T], instance: T) -> None:
        """Register an existing object."""
        self._providers[interface] = providers.Object(instance)

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Replace whatever is registered for interface with provider."""
        self._providers[interface] = provider

    def get(self, interface: type[T]) -> T | None:
        """Return the service, or None if nothing is registered."""
        provider = self._providers.get(interface)
        if provider is None:
            return None
        return provider()

    def __contains__(self, interface: Any) -> bool:
        return interface in self._providers


def get_container() -> ServiceContainer:
    """Get the global service container."""
    return ServiceContainer.current()


def resolve_or_default(interface: type[T], default_factory: Callable[[], T]) -> T:
    """Look a service up, or build a default one when none is registered.

    Lets build steps run outside the CLI (in tests, or embedded) without
    bootstrapping first.

    Example:
        >>> from glive.core.interfaces.logger import ILogger
        >>> from glive.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    instance = get_container().get(interface)
    if instance is not None:
        return instance
    return default_factory()
