"""
Exception hierarchy for digestkit.

Two families live here:

- ``DigestError`` subclasses are data errors. They describe bad external
  input (a malformed digest string, a wrong encoded length, an unknown
  algorithm) and are raised by ``parse``/``validate`` for the caller to handle.
- ``ContractViolationError`` subclasses signal misuse by the calling code,
  such as registering a malformed algorithm name or reading the components
  of a digest that was never validated. They are not meant to be caught.
"""

from __future__ import annotations


class DigestException(Exception):
    """
    Base exception for all digestkit errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (digest, algorithm, lengths)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether the caller can reasonably handle the error
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Data Errors
# =============================================================================


class DigestError(DigestException, ValueError):
    """
    Base class for errors caused by digest data.

    Inherits from ValueError so callers validating untrusted strings can
    catch the usual exception type.
    """

    default_message = "invalid digest"

    def __init__(
        self,
        message: str | None = None,
        *,
        digest: str | None = None,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if digest is not None:
            ctx["digest"] = digest
        if algorithm is not None:
            ctx["algorithm"] = algorithm
        super().__init__(message or self.default_message, context=ctx, cause=cause)


class InvalidDigestFormatError(DigestError):
    """The digest string does not have the ``algorithm:encoded`` shape."""

    default_message = "invalid checksum digest format"


class InvalidDigestLengthError(DigestError):
    """The encoded part has the wrong length for a registered algorithm."""

    default_message = "invalid checksum digest length"

    def __init__(
        self,
        message: str | None = None,
        *,
        expected: int | None = None,
        actual: int | None = None,
        **kwargs,
    ) -> None:
        ctx = kwargs.pop("context", None) or {}
        if expected is not None:
            ctx["expected"] = expected
        if actual is not None:
            ctx["actual"] = actual
        super().__init__(message, context=ctx, **kwargs)


class UnsupportedDigestError(DigestError):
    """The digest names an algorithm that is not registered."""

    default_message = "unsupported digest algorithm"


# =============================================================================
# Contract Violations
# =============================================================================


class ContractViolationError(DigestException, RuntimeError):
    """
    Base class for programmer errors.

    Raised when calling code breaks a precondition of the API. These are
    never raised for bad external data that went through ``parse``.
    """

    exit_code: int = 2
    recoverable: bool = False


class InvalidAlgorithmNameError(ContractViolationError):
    """Attempted to register an algorithm whose name breaks the name grammar."""

    def __init__(self, name: str, *, context: dict | None = None) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__("algorithm name does not match naming grammar", context=ctx)


class AlgorithmConflictError(ContractViolationError):
    """An algorithm name was registered twice with different behavior."""

    def __init__(self, name: str, *, context: dict | None = None) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__("algorithm already registered with a different entry", context=ctx)


class UnavailableAlgorithmError(ContractViolationError):
    """A hash object was requested for an algorithm that is not registered."""

    def __init__(self, name: str, *, context: dict | None = None) -> None:
        ctx = context or {}
        ctx["name"] = name
        super().__init__("algorithm is not registered", context=ctx)


class MalformedDigestError(ContractViolationError):
    """An unchecked accessor was used on a digest with no ':' separator."""

    def __init__(self, digest: str, *, context: dict | None = None) -> None:
        ctx = context or {}
        ctx["digest"] = digest
        super().__init__("no ':' separator in digest", context=ctx)


class VerifierFinalizedError(ContractViolationError):
    """A verifier was written to or finalized after it already finalized."""

    def __init__(self, digest: str, *, context: dict | None = None) -> None:
        ctx = context or {}
        ctx["digest"] = digest
        super().__init__("verifier already finalized", context=ctx)
