"""
Hash algorithm registry.

Maps algorithm names to the constructor, encoder and expected encoded
length used to build and check digests. A registry is an ordinary object:
the process-wide default lives in the service container and is reached
through get_registry(), while tests and embedding applications can build
and pass their own instance.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass

from ..core.container import get_container
from ..core.di import get_logger
from ..core.exceptions import (
    AlgorithmConflictError,
    ContractViolationError,
    InvalidAlgorithmNameError,
)
from ..core.patterns import is_valid_algorithm_name
from .strategies import DEFAULT_STRATEGIES, Hasher, HashStrategy, hex_encode

Constructor = Callable[[], Hasher]
Encoder = Callable[[bytes], str]


@dataclass(frozen=True)
class AlgorithmEntry:
    """What the registry knows about one algorithm."""

    constructor: Constructor
    encoder: Encoder = hex_encode
    encoded_length: int = 0  # 0 disables the length check


class AlgorithmRegistry:
    """
    Registry of hash algorithms keyed by name.

    Registration is expected during start-up; lookups may then run from any
    thread. A lock keeps lookups consistent if the two do overlap.

    Example:
        registry = AlgorithmRegistry()

        # Built-ins
        registry.available("sha256")  # True

        # Custom algorithm
        registry.register("sha256-test", hashlib.sha256)
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register sha256, sha384, sha512, blake3
        """
        self._entries: dict[str, AlgorithmEntry] = {}
        self._lock = threading.RLock()
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        for strategy in DEFAULT_STRATEGIES:
            self.register_strategy(strategy)

    def register(self, name: str, constructor: Constructor, *, replace: bool = False) -> None:
        """
        Register an algorithm with hex encoding and no length check.

        Args:
            name: Algorithm name; must match the algorithm grammar
            constructor: Zero-argument callable returning a fresh hash object
            replace: Overwrite an existing, different entry instead of failing

        Raises:
            InvalidAlgorithmNameError: If name breaks the grammar
            AlgorithmConflictError: If name is taken by a different entry
        """
        self.register_with_encoder(name, constructor, hex_encode, 0, replace=replace)

    def register_with_encoder(
        self,
        name: str,
        constructor: Constructor,
        encoder: Encoder,
        encoded_length: int,
        *,
        replace: bool = False,
    ) -> None:
        """
        Register an algorithm with a custom encoder and expected encoded length.

        Args:
            name: Algorithm name; must match the algorithm grammar
            constructor: Zero-argument callable returning a fresh hash object
            encoder: Turns raw hash output into its canonical text form
            encoded_length: Exact length of the encoded text, 0 to skip the check
            replace: Overwrite an existing, different entry instead of failing

        Raises:
            InvalidAlgorithmNameError: If name breaks the grammar
            AlgorithmConflictError: If name is taken by a different entry
        """
        if not isinstance(name, str) or not is_valid_algorithm_name(name):
            raise InvalidAlgorithmNameError(str(name))
        if encoded_length < 0:
            raise ContractViolationError(
                "encoded length must not be negative",
                context={"name": name, "encoded_length": encoded_length},
            )

        entry = AlgorithmEntry(constructor, encoder, encoded_length)
        with self._lock:
            existing = self._entries.get(name)
            if existing == entry:
                return
            if existing is not None:
                if not replace:
                    raise AlgorithmConflictError(name)
                get_logger().warning("Replacing registered hash algorithm %s", name)
            self._entries[name] = entry

        get_logger().debug(
            "Registered hash algorithm %s (encoded length %d)", name, encoded_length
        )

    def register_strategy(self, strategy: HashStrategy, *, replace: bool = False) -> None:
        """
        Register a hash strategy.

        Args:
            strategy: HashStrategy implementation
            replace: Overwrite an existing, different entry instead of failing
        """
        self.register_with_encoder(
            strategy.algorithm_name,
            strategy.create_hasher,
            strategy.encode,
            strategy.encoded_length,
            replace=replace,
        )

    def lookup(self, name: str) -> AlgorithmEntry | None:
        """
        Get the entry for an algorithm.

        Args:
            name: Algorithm name (e.g., 'sha256')

        Returns:
            AlgorithmEntry or None if not registered
        """
        with self._lock:
            return self._entries.get(name)

    def available(self, name: str) -> bool:
        """Check if an algorithm is registered."""
        with self._lock:
            return name in self._entries

    @property
    def available_algorithms(self) -> list[str]:
        """List registered algorithm names, sorted."""
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        """Check if algorithm is registered."""
        return isinstance(name, str) and self.available(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# -------------------------------------------------------------------------
# Process-wide default registry
# -------------------------------------------------------------------------

_default_lock = threading.Lock()


def get_registry() -> AlgorithmRegistry:
    """Return the default registry, creating it with built-ins on first use."""
    container = get_container()
    with _default_lock:
        if not container.is_registered(AlgorithmRegistry):
            container.register_singleton(AlgorithmRegistry, factory=AlgorithmRegistry)
    return container.resolve(AlgorithmRegistry)


def resolve_registry(registry: AlgorithmRegistry | None) -> AlgorithmRegistry:
    """Return registry, or the default one when None is given."""
    return registry if registry is not None else get_registry()


def set_registry(registry: AlgorithmRegistry) -> None:
    """Install a registry as the process-wide default."""
    with _default_lock:
        get_container().register_singleton(AlgorithmRegistry, implementation=registry)


def reset_registry() -> None:
    """Drop the default registry; the next get_registry() builds a fresh one."""
    with _default_lock:
        get_container().unregister(AlgorithmRegistry)


def register_algorithm(name: str, constructor: Constructor, *, replace: bool = False) -> None:
    """Register an algorithm on the default registry with hex encoding."""
    get_registry().register(name, constructor, replace=replace)


def register_algorithm_with_encoder(
    name: str,
    constructor: Constructor,
    encoder: Encoder,
    encoded_length: int,
    *,
    replace: bool = False,
) -> None:
    """Register an algorithm on the default registry with a custom encoder."""
    get_registry().register_with_encoder(
        name, constructor, encoder, encoded_length, replace=replace
    )
