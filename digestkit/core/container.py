"""
Service container for digestkit.

Uses dependency-injector to hold the process-wide services that many call
sites share without threading them through every call: the default
algorithm registry and the diagnostic logger. Tests reset the container
to get isolated instances.
"""

import threading
from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """
    Dependency injection container for digestkit.

    Maps an interface type to a dependency-injector provider.
    """

    _instance: Optional["ServiceContainer"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        """Initialize the container with no registrations."""
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the global container (for testing)."""
        with cls._instance_lock:
            cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register a singleton service.

        Args:
            interface: The interface/protocol type
            implementation: Optional concrete instance
            factory: Optional factory function (for lazy init)
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.ThreadSafeSingleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def unregister(self, interface: type) -> None:
        """Drop the provider for an interface, if any."""
        self._providers.pop(interface, None)

    def is_registered(self, interface: type) -> bool:
        """Check whether a provider exists for an interface."""
        return interface in self._providers

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Resolve a service, returning None if not registered."""
        if interface not in self._providers:
            return None
        return self._providers[interface]()


# -------------------------------------------------------------------------
# Module-level convenience functions
# -------------------------------------------------------------------------


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()

