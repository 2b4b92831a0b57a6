"""
Algorithm value type.

An Algorithm is a plain string naming a hash scheme ("sha256", "blake3",
...). Everything it can do beyond being a string goes through an
AlgorithmRegistry: the default one unless a registry is passed explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING

from ..hashing.registry import AlgorithmEntry, AlgorithmRegistry, resolve_registry
from ..hashing.strategies import Hasher, hex_encode
from .exceptions import InvalidDigestLengthError, UnavailableAlgorithmError, UnsupportedDigestError

if TYPE_CHECKING:
    from .digest import Digest

DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1MB reads


class Algorithm(str):
    """Name of a registered (or would-be registered) hash algorithm."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Algorithm({str.__repr__(self)})"

    @classmethod
    def from_name(cls, value: str, registry: AlgorithmRegistry | None = None) -> Algorithm:
        """
        Turn user input into an Algorithm, accepting only registered names.

        Raises:
            UnsupportedDigestError: If the name is not registered
        """
        algorithm = cls(value)
        if not algorithm.available(registry):
            raise UnsupportedDigestError(algorithm=str(value))
        return algorithm

    def _entry(self, registry: AlgorithmRegistry | None) -> AlgorithmEntry | None:
        return resolve_registry(registry).lookup(str(self))

    def available(self, registry: AlgorithmRegistry | None = None) -> bool:
        """Return True if the algorithm is registered."""
        return resolve_registry(registry).available(str(self))

    def hash(self, registry: AlgorithmRegistry | None = None) -> Hasher:
        """
        Return a fresh hash object for this algorithm.

        Raises:
            UnavailableAlgorithmError: If the algorithm is not registered
        """
        entry = self._entry(registry)
        if entry is None:
            raise UnavailableAlgorithmError(str(self))
        return entry.constructor()

    def size(self, registry: AlgorithmRegistry | None = None) -> int:
        """Return the raw digest size in bytes."""
        return self.hash(registry).digest_size  # type: ignore[attr-defined]

    def encode_digest(self, raw: bytes, registry: AlgorithmRegistry | None = None) -> str:
        """Encode raw hash output with the registered encoder (hex by default)."""
        entry = self._entry(registry)
        encoder = entry.encoder if entry is not None else hex_encode
        return encoder(raw)

    def validate(self, encoded: str, registry: AlgorithmRegistry | None = None) -> None:
        """
        Check an encoded value against this algorithm's registration.

        Only the length is checked here; the character set is covered by the
        digest grammar.

        Raises:
            UnsupportedDigestError: If the algorithm is not registered
            InvalidDigestLengthError: If the registered length does not match
        """
        entry = self._entry(registry)
        if entry is None:
            raise UnsupportedDigestError(algorithm=str(self))
        if entry.encoded_length and len(encoded) != entry.encoded_length:
            raise InvalidDigestLengthError(
                algorithm=str(self),
                expected=entry.encoded_length,
                actual=len(encoded),
            )

    def from_reader(
        self,
        stream: IO[bytes],
        registry: AlgorithmRegistry | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Digest:
        """
        Digest everything a binary stream yields until end-of-stream.

        Errors raised by stream.read() propagate unchanged.
        """
        from .digest import Digest

        hasher = self.hash(registry)
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)
        return Digest.from_hasher(self, hasher, registry)

    def from_bytes(self, data: bytes, registry: AlgorithmRegistry | None = None) -> Digest:
        """Digest an in-memory byte sequence."""
        from .digest import Digest

        hasher = self.hash(registry)
        hasher.update(data)
        return Digest.from_hasher(self, hasher, registry)

    def from_string(self, text: str, registry: AlgorithmRegistry | None = None) -> Digest:
        """Digest the UTF-8 encoding of text."""
        return self.from_bytes(text.encode("utf-8"), registry)

    def from_path(
        self,
        path: str | Path,
        registry: AlgorithmRegistry | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Digest:
        """Digest the contents of a file."""
        with open(path, "rb") as f:
            return self.from_reader(f, registry, chunk_size)


SHA256 = Algorithm("sha256")
SHA384 = Algorithm("sha384")
SHA512 = Algorithm("sha512")
BLAKE3 = Algorithm("blake3")

# Used by the argument-free helpers below.
CANONICAL = SHA256


def from_reader(stream: IO[bytes], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Digest:
    """Digest a stream with the canonical algorithm."""
    return CANONICAL.from_reader(stream, chunk_size=chunk_size)


def from_bytes(data: bytes) -> Digest:
    """Digest bytes with the canonical algorithm."""
    return CANONICAL.from_bytes(data)


def from_string(text: str) -> Digest:
    """Digest text with the canonical algorithm."""
    return CANONICAL.from_string(text)
