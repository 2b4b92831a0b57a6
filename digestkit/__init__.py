"""
digestkit - content-addressable digest identifiers.

Builds, parses, validates and verifies strings of the form
``<algorithm>:<encoded>``, such as::

    sha256:7173b809ca12ec5dee4506cd86be934c4596dd234ee82c0662eac04a8c2c71dc

Usage:
    from digestkit import Digest, SHA256

    d = SHA256.from_bytes(b"hello")
    Digest.parse(str(d))          # raises on malformed input
    v = d.verifier()
    v.write(b"hello")
    v.verified()                  # True
"""

from .core.algorithm import (
    BLAKE3,
    CANONICAL,
    SHA256,
    SHA384,
    SHA512,
    Algorithm,
    from_bytes,
    from_reader,
    from_string,
)
from .core.digest import Digest
from .core.exceptions import (
    AlgorithmConflictError,
    ContractViolationError,
    DigestError,
    DigestException,
    InvalidAlgorithmNameError,
    InvalidDigestFormatError,
    InvalidDigestLengthError,
    MalformedDigestError,
    UnavailableAlgorithmError,
    UnsupportedDigestError,
    VerifierFinalizedError,
)
from .core.patterns import ALGORITHM_PATTERN, DIGEST_PATTERN, DIGEST_PATTERN_ANCHORED
from .core.verifier import Verifier
from .hashing import (
    AlgorithmEntry,
    AlgorithmRegistry,
    HashStrategy,
    get_registry,
    register_algorithm,
    register_algorithm_with_encoder,
)

__all__ = [
    "ALGORITHM_PATTERN",
    "BLAKE3",
    "CANONICAL",
    "DIGEST_PATTERN",
    "DIGEST_PATTERN_ANCHORED",
    "SHA256",
    "SHA384",
    "SHA512",
    "Algorithm",
    "AlgorithmConflictError",
    "AlgorithmEntry",
    "AlgorithmRegistry",
    "ContractViolationError",
    "Digest",
    "DigestError",
    "DigestException",
    "HashStrategy",
    "InvalidAlgorithmNameError",
    "InvalidDigestFormatError",
    "InvalidDigestLengthError",
    "MalformedDigestError",
    "UnavailableAlgorithmError",
    "UnsupportedDigestError",
    "Verifier",
    "VerifierFinalizedError",
    "from_bytes",
    "from_reader",
    "from_string",
    "get_registry",
    "register_algorithm",
    "register_algorithm_with_encoder",
]
