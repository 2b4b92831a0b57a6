"""
Hash algorithm strategies and registry.

New algorithms are added by registering them, either as a bare constructor
or as a HashStrategy, without touching the digest code.
"""

from .registry import (
    AlgorithmEntry,
    AlgorithmRegistry,
    get_registry,
    register_algorithm,
    register_algorithm_with_encoder,
    reset_registry,
    resolve_registry,
    set_registry,
)
from .strategies import (
    Blake3Strategy,
    Hasher,
    HashStrategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
    hex_encode,
)

__all__ = [
    "AlgorithmEntry",
    "AlgorithmRegistry",
    "Blake3Strategy",
    "HashStrategy",
    "Hasher",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "get_registry",
    "hex_encode",
    "register_algorithm",
    "register_algorithm_with_encoder",
    "reset_registry",
    "resolve_registry",
    "set_registry",
]
