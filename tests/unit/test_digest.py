"""
Unit tests for the Digest value type.

Tests parsing and validation error classification, the trusting
constructors and the unchecked accessors.
"""

import hashlib

import pytest

from digestkit.core.algorithm import SHA256, SHA512, Algorithm
from digestkit.core.digest import Digest
from digestkit.core.exceptions import (
    DigestError,
    InvalidDigestFormatError,
    InvalidDigestLengthError,
    MalformedDigestError,
    UnavailableAlgorithmError,
    UnsupportedDigestError,
)
from digestkit.core.patterns import DIGEST_PATTERN, DIGEST_PATTERN_ANCHORED

HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


class TestValidate:
    """Digest.validate raises exactly one error class per failure."""

    @pytest.mark.parametrize(
        "value",
        [
            "sha256:" + "a" * 64,
            f"sha256:{HELLO_SHA256}",
            "sha384:" + "0" * 96,
            "sha512:" + "f" * 128,
            "blake3:" + "1" * 64,
        ],
    )
    def test_valid(self, value):
        assert Digest(value).validate() is None
        assert Digest(value).is_valid()

    @pytest.mark.parametrize(
        "value",
        [
            "sha256",
            "sha256:",
            ":" + "a" * 64,
            "",
            ":",
            "Bogus:abcdef",
            "bogus-:abcdef",
            "sha256:" + "!" * 64,
            "sha256:" + "a" * 32 + ":" + "a" * 31,
            "sha256:" + "a" * 63 + " ",
            "bo gus:abc",
        ],
    )
    def test_invalid_format(self, value):
        with pytest.raises(InvalidDigestFormatError):
            Digest(value).validate()

    @pytest.mark.parametrize("value", ["bogus:abcdef", "md5:" + "a" * 32, "sha3.256+x:AbC=_-"])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedDigestError):
            Digest(value).validate()

    @pytest.mark.parametrize(
        "value",
        ["sha256:" + "a" * 63, "sha256:" + "a" * 65, "sha512:" + "a" * 64, "blake3:abc"],
    )
    def test_invalid_length(self, value):
        with pytest.raises(InvalidDigestLengthError):
            Digest(value).validate()

    def test_errors_are_value_errors(self):
        """Data errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Digest("nope").validate()
        assert not Digest("nope").is_valid()

    def test_error_carries_digest(self):
        with pytest.raises(InvalidDigestFormatError) as exc_info:
            Digest("sha256").validate()
        assert exc_info.value.context["digest"] == "sha256"
        assert exc_info.value.recoverable is True
        assert "invalid checksum digest format" in str(exc_info.value)

    def test_uses_given_registry(self, empty_registry):
        """A digest of a built-in is unsupported in an empty registry."""
        with pytest.raises(UnsupportedDigestError):
            Digest("sha256:" + "a" * 64).validate(empty_registry)

    def test_custom_algorithm_without_length(self, registry):
        registry.register("sha256-test", hashlib.sha256)
        Digest("sha256-test:abc").validate(registry)


class TestParse:
    """Tests for Digest.parse."""

    def test_parse_valid(self):
        d = Digest.parse(f"sha256:{HELLO_SHA256}")
        assert isinstance(d, Digest)
        assert d == f"sha256:{HELLO_SHA256}"

    @pytest.mark.parametrize(
        "value,error",
        [
            ("sha256", InvalidDigestFormatError),
            ("bogus:abcdef", UnsupportedDigestError),
            ("sha256:" + "a" * 63, InvalidDigestLengthError),
        ],
    )
    def test_parse_errors_unchanged(self, value, error):
        with pytest.raises(error):
            Digest.parse(value)

    def test_parse_catch_all(self):
        with pytest.raises(DigestError):
            Digest.parse("x")


class TestConstructors:
    """Tests for the trusting constructors."""

    def test_from_encoded_round_trip(self):
        d = Digest.from_encoded(SHA512, "abc")
        assert d == "sha512:abc"
        assert d.algorithm == SHA512
        assert d.encoded == "abc"

    def test_from_encoded_does_not_validate(self):
        """No check happens at construction time."""
        d = Digest.from_encoded("BAD", "!!")
        assert d == "BAD:!!"
        assert not d.is_valid()

    def test_from_bytes(self):
        raw = hashlib.sha256(b"hello").digest()
        assert Digest.from_bytes(SHA256, raw) == f"sha256:{HELLO_SHA256}"
        assert Digest.from_bytes("sha256", raw) == f"sha256:{HELLO_SHA256}"

    def test_from_hasher(self):
        h = hashlib.sha256(b"hello")
        assert Digest.from_hasher(SHA256, h) == f"sha256:{HELLO_SHA256}"


class TestAccessors:
    """Tests for algorithm, encoded and str."""

    def test_components(self):
        d = SHA256.from_string("hello")
        assert d.algorithm == "sha256"
        assert isinstance(d.algorithm, Algorithm)
        assert d.encoded == HELLO_SHA256

    def test_splits_on_first_colon(self):
        d = Digest("a:b:c")
        assert d.algorithm == "a"
        assert d.encoded == "b:c"

    def test_missing_separator_faults(self):
        d = Digest("sha256")
        with pytest.raises(MalformedDigestError):
            _ = d.algorithm
        with pytest.raises(MalformedDigestError):
            _ = d.encoded

    def test_str_is_identity(self):
        value = f"sha256:{HELLO_SHA256}"
        d = Digest(value)
        assert str(d) == value
        assert type(str(d)) is str
        assert repr(d) == f"Digest('{value}')"

    def test_verifier_unregistered_faults(self):
        with pytest.raises(UnavailableAlgorithmError):
            Digest("md5:abc").verifier()

    def test_verifier_malformed_faults(self):
        with pytest.raises(MalformedDigestError):
            Digest("sha256").verifier()


class TestGrammar:
    """Tests for the public digest patterns."""

    def test_unanchored_finds_digest_in_text(self):
        text = f"image@sha256:{HELLO_SHA256} pulled"
        match = DIGEST_PATTERN.search(text)
        assert match is not None
        assert match.group(0) == f"sha256:{HELLO_SHA256}"

    def test_anchored_rejects_surrounding_text(self):
        assert DIGEST_PATTERN_ANCHORED.match(f"sha256:{HELLO_SHA256}")
        assert not DIGEST_PATTERN_ANCHORED.match(f" sha256:{HELLO_SHA256}")
