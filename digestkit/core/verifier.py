"""
Streaming verification of content against a digest.

A Verifier is a write-only sink: feed it the content as it arrives, then
ask once whether the content hashed to the expected digest.

    verifier = digest.verifier()
    shutil.copyfileobj(response, verifier)
    if not verifier.verified():
        ...

It is single use. Writing after verified(), or calling verified() twice,
raises VerifierFinalizedError.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

from ..hashing.registry import AlgorithmRegistry, resolve_registry
from .di import get_logger
from .exceptions import VerifierFinalizedError

if TYPE_CHECKING:
    from .digest import Digest


class Verifier:
    """Accumulates written bytes and compares their hash with a digest."""

    def __init__(self, digest: Digest, registry: AlgorithmRegistry | None = None) -> None:
        self._registry = resolve_registry(registry)
        self._digest = digest
        self._algorithm = digest.algorithm
        self._hasher = self._algorithm.hash(self._registry)
        self._bytes_written = 0
        self._finalized = False

    @property
    def digest(self) -> Digest:
        """The digest this verifier checks against."""
        return self._digest

    @property
    def bytes_written(self) -> int:
        return self._bytes_written

    @property
    def finalized(self) -> bool:
        return self._finalized

    def writable(self) -> bool:
        return not self._finalized

    def write(self, data: bytes) -> int:
        """Feed data into the hash. Returns the number of bytes consumed."""
        if self._finalized:
            raise VerifierFinalizedError(str(self._digest))
        self._hasher.update(data)
        n = len(data)
        self._bytes_written += n
        return n

    def verified(self) -> bool:
        """Finalize and report whether the written content matches the digest."""
        if self._finalized:
            raise VerifierFinalizedError(str(self._digest))
        self._finalized = True

        actual = self._algorithm.encode_digest(self._hasher.digest(), self._registry)
        expected = self._digest.encoded
        match = hmac.compare_digest(actual.encode("utf-8"), expected.encode("utf-8"))
        if not match:
            get_logger().debug(
                "Digest mismatch for %s after %d bytes: got %s:%s",
                self._digest,
                self._bytes_written,
                self._algorithm,
                actual,
            )
        return match
