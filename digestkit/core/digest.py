"""
Digest value type.

A Digest is the textual identifier of some content:

    sha256:7173b809ca12ec5dee4506cd86be934c4596dd234ee82c0662eac04a8c2c71dc

Constructing a Digest never validates it. Use Digest.parse() for strings
that come from outside the process; the trusting constructors are for
values built from a hash computation or an already checked source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..hashing.registry import AlgorithmRegistry
from .algorithm import Algorithm
from .exceptions import InvalidDigestFormatError, MalformedDigestError
from .patterns import matches_digest_grammar

if TYPE_CHECKING:
    from ..hashing.strategies import Hasher
    from .verifier import Verifier

SEPARATOR = ":"


class Digest(str):
    """Content identifier of the form ``<algorithm>:<encoded>``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Digest({str.__repr__(self)})"

    @classmethod
    def parse(cls, value: str, registry: AlgorithmRegistry | None = None) -> Digest:
        """
        Build a Digest from untrusted text and validate it.

        Raises:
            InvalidDigestFormatError: If the text is not a well formed digest
            UnsupportedDigestError: If the algorithm is not registered
            InvalidDigestLengthError: If the encoded part has the wrong length
        """
        digest = cls(value)
        digest.validate(registry)
        return digest

    @classmethod
    def from_bytes(
        cls,
        algorithm: str,
        raw: bytes,
        registry: AlgorithmRegistry | None = None,
    ) -> Digest:
        """Build a Digest by encoding raw hash output. Not validated."""
        algorithm = Algorithm(algorithm)
        return cls(algorithm + SEPARATOR + algorithm.encode_digest(raw, registry))

    @classmethod
    def from_encoded(cls, algorithm: str, encoded: str) -> Digest:
        """Build a Digest from an already encoded value. Not validated."""
        return cls(str(algorithm) + SEPARATOR + encoded)

    @classmethod
    def from_hasher(
        cls,
        algorithm: str,
        hasher: Hasher,
        registry: AlgorithmRegistry | None = None,
    ) -> Digest:
        """Build a Digest from the current state of a hash object."""
        return cls.from_bytes(algorithm, hasher.digest(), registry)

    def validate(self, registry: AlgorithmRegistry | None = None) -> None:
        """
        Check that this digest is well formed and uses a known algorithm.

        Raises:
            InvalidDigestFormatError: If the text is not a well formed digest
            UnsupportedDigestError: If the algorithm is not registered
            InvalidDigestLengthError: If the encoded part has the wrong length
        """
        algorithm, sep, encoded = self.partition(SEPARATOR)
        if not sep or not encoded or not matches_digest_grammar(self):
            raise InvalidDigestFormatError(digest=str(self))
        Algorithm(algorithm).validate(encoded, registry)

    def is_valid(self, registry: AlgorithmRegistry | None = None) -> bool:
        """Return True if validate() would succeed."""
        try:
            self.validate(registry)
        except ValueError:
            return False
        return True

    def _split(self) -> tuple[str, str]:
        algorithm, sep, encoded = self.partition(SEPARATOR)
        if not sep:
            raise MalformedDigestError(str(self))
        return algorithm, encoded

    @property
    def algorithm(self) -> Algorithm:
        """
        Algorithm part of the digest.

        Raises:
            MalformedDigestError: If there is no ':' separator
        """
        return Algorithm(self._split()[0])

    @property
    def encoded(self) -> str:
        """
        Encoded part of the digest.

        Raises:
            MalformedDigestError: If there is no ':' separator
        """
        return self._split()[1]

    def verifier(self, registry: AlgorithmRegistry | None = None) -> Verifier:
        """
        Return a Verifier that checks streamed content against this digest.

        Raises:
            MalformedDigestError: If there is no ':' separator
            UnavailableAlgorithmError: If the algorithm is not registered
        """
        from .verifier import Verifier

        return Verifier(self, registry)

    def __str__(self) -> str:
        return str.__str__(self)
