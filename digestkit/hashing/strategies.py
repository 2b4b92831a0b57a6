"""
Hash algorithm strategy implementations.

Each strategy bundles what the registry needs to know about one algorithm:
its name, a constructor for fresh hash objects, the encoder applied to the
raw hash output and the exact length of the encoded text.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import Protocol

import blake3


class Hasher(Protocol):
    """Stateful hash computation object, as produced by hashlib or blake3."""

    def update(self, data: bytes, /) -> object: ...

    def digest(self) -> bytes: ...


def hex_encode(raw: bytes) -> str:
    """Default encoder: lowercase hexadecimal."""
    return raw.hex()


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - create_hasher(): Factory for hasher instances

    They may override encode() and encoded_length when the algorithm is not
    written as hex, or when its output size differs.
    """

    encoded_length: int = 0

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'sha256', 'blake3')."""
        pass

    @staticmethod
    @abstractmethod
    def create_hasher() -> Hasher:
        """Create a new hasher instance."""
        pass

    encode = staticmethod(hex_encode)


class SHA256Strategy(HashStrategy):
    """SHA-256 - the canonical algorithm."""

    algorithm_name = "sha256"
    encoded_length = 64

    @staticmethod
    def create_hasher() -> Hasher:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 - truncated SHA-512."""

    algorithm_name = "sha384"
    encoded_length = 96

    @staticmethod
    def create_hasher() -> Hasher:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 - stronger variant of SHA-2."""

    algorithm_name = "sha512"
    encoded_length = 128

    @staticmethod
    def create_hasher() -> Hasher:
        return hashlib.sha512()


class Blake3Strategy(HashStrategy):
    """BLAKE3 with its default 32-byte output."""

    algorithm_name = "blake3"
    encoded_length = 64

    @staticmethod
    def create_hasher() -> Hasher:
        return blake3.blake3()


DEFAULT_STRATEGIES: tuple[HashStrategy, ...] = (
    SHA256Strategy(),
    SHA384Strategy(),
    SHA512Strategy(),
    Blake3Strategy(),
)
