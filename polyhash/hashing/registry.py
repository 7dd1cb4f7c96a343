"""
Hash algorithm registry.

Maps algorithm names to hasher factories so that configuration files and
the CLI can select an algorithm by name, and so that new algorithms can be
added without modifying existing code.
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.container import get_container
from ..core.exceptions import UnknownAlgorithmError
from ..core.interfaces.hasher import Hasher
from .algorithms import BUILTIN_HASHERS

HasherFactory = Callable[[], Hasher]


class HashAlgorithmRegistry:
    """
    Registry for hasher factories.

    Example:
        registry = HashAlgorithmRegistry()

        # Use built-in algorithms
        hasher = registry.create("sha256")

        # Register custom algorithm
        registry.register("my_custom", MyCustomHasher)
        hasher = registry.create("my_custom")
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._factories: dict[str, HasherFactory] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        for name, factory in BUILTIN_HASHERS.items():
            self.register(name, factory)

    def register(self, name: str, factory: HasherFactory) -> None:
        """
        Register (or replace) a hasher factory.

        Args:
            name: Algorithm name
            factory: Zero-argument callable returning a Hasher
        """
        self._factories[name] = factory

    def get(self, name: str) -> HasherFactory | None:
        """
        Get the factory for an algorithm name.

        Returns:
            Factory or None if not registered
        """
        return self._factories.get(name)

    def create(self, name: str) -> Hasher:
        """
        Create a hasher for the given algorithm.

        Raises:
            UnknownAlgorithmError: If algorithm not registered
        """
        factory = self.get(name)
        if factory is None:
            raise UnknownAlgorithmError(f"Unknown hash algorithm: {name}", algorithm=name)
        return factory()

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names."""
        return list(self._factories.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._factories


def get_registry() -> HashAlgorithmRegistry:
    """Return the shared registry, registering it with the container on first use."""
    container = get_container()
    registry = container.try_resolve(HashAlgorithmRegistry)
    if registry is None:
        container.register_singleton(HashAlgorithmRegistry, factory=HashAlgorithmRegistry)
        registry = container.resolve(HashAlgorithmRegistry)
    return registry
