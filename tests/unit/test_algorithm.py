"""
Unit tests for the Algorithm value type.

Tests hashing from bytes, strings, streams and files, encoding,
length validation and the canonical helpers.
"""

import base64
import hashlib
import io
import os

import blake3
import pytest

import digestkit
from digestkit.core.algorithm import BLAKE3, CANONICAL, SHA256, SHA384, SHA512, Algorithm
from digestkit.core.digest import Digest
from digestkit.core.exceptions import (
    InvalidDigestLengthError,
    UnavailableAlgorithmError,
    UnsupportedDigestError,
)

HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

REFERENCE = {
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
    "blake3": blake3.blake3,
}


class FailingReader:
    """Stream that yields one chunk and then fails."""

    def __init__(self):
        self.calls = 0

    def read(self, size=-1):
        self.calls += 1
        if self.calls == 1:
            return b"partial"
        raise OSError("connection reset")


class TestConstants:
    """Tests for the named algorithm constants."""

    def test_canonical_is_sha256(self):
        assert CANONICAL == "sha256"
        assert CANONICAL is SHA256

    def test_algorithm_is_a_string(self):
        """Algorithms compare and hash like their names."""
        assert SHA512 == "sha512"
        assert {SHA384: 1}["sha384"] == 1
        assert str(BLAKE3) == "blake3"
        assert repr(SHA256) == "Algorithm('sha256')"


class TestFroms:
    """from_bytes, from_string and from_reader agree for every algorithm."""

    @pytest.mark.parametrize("name", sorted(REFERENCE))
    def test_all_forms_agree(self, registry, name):
        """All three entry points give '<alg>:' + hex(hash(p))."""
        payload = os.urandom(1 << 16)
        alg = Algorithm(name)
        expected = f"{name}:{REFERENCE[name](payload).hexdigest()}"

        digests = [
            alg.from_bytes(payload, registry),
            alg.from_reader(io.BytesIO(payload), registry),
            alg.from_reader(io.BytesIO(payload), registry, chunk_size=1000),
        ]
        for d in digests:
            assert d == expected
            assert isinstance(d, Digest)

    def test_from_string_matches_from_bytes(self, registry):
        """from_string hashes the UTF-8 encoding."""
        text = "héllo wörld"
        assert SHA256.from_string(text, registry) == SHA256.from_bytes(text.encode("utf-8"), registry)

    def test_known_value(self):
        assert SHA256.from_string("hello") == f"sha256:{HELLO_SHA256}"

    def test_empty_input(self):
        assert SHA256.from_bytes(b"") == f"sha256:{EMPTY_SHA256}"
        assert SHA256.from_reader(io.BytesIO(b"")) == f"sha256:{EMPTY_SHA256}"

    def test_canonical_helpers(self):
        """Argument-free helpers use the canonical algorithm."""
        payload = b"hello"
        expected = f"sha256:{HELLO_SHA256}"
        assert digestkit.from_bytes(payload) == expected
        assert digestkit.from_string("hello") == expected
        assert digestkit.from_reader(io.BytesIO(payload)) == expected

    def test_from_reader_propagates_errors(self):
        """Read errors surface unchanged."""
        with pytest.raises(OSError, match="connection reset"):
            SHA256.from_reader(FailingReader())

    def test_from_path(self, tmp_path):
        """Files are hashed by content."""
        path = tmp_path / "blob.bin"
        path.write_bytes(b"hello")
        assert SHA256.from_path(path) == f"sha256:{HELLO_SHA256}"
        assert SHA256.from_path(str(path), chunk_size=2) == f"sha256:{HELLO_SHA256}"

    def test_from_path_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SHA256.from_path(tmp_path / "missing")

    def test_custom_encoder_is_used(self, registry):
        """Digests of custom algorithms use the registered encoder."""

        def b64(raw: bytes) -> str:
            return base64.urlsafe_b64encode(raw).decode("ascii")

        registry.register_with_encoder("sha256-b64", hashlib.sha256, b64, 44)
        d = Algorithm("sha256-b64").from_bytes(b"hello", registry)
        assert d == "sha256-b64:" + b64(hashlib.sha256(b"hello").digest())


class TestHash:
    """Tests for hash object creation."""

    def test_hash_returns_fresh_object(self):
        h1 = SHA256.hash()
        h2 = SHA256.hash()
        h1.update(b"x")
        assert h2.digest() == hashlib.sha256().digest()

    def test_hash_unregistered_faults(self, registry):
        """Unregistered algorithms cannot produce a hash object."""
        with pytest.raises(UnavailableAlgorithmError):
            Algorithm("md5").hash(registry)

    def test_from_bytes_unregistered_faults(self):
        with pytest.raises(UnavailableAlgorithmError):
            Algorithm("md5").from_bytes(b"data")

    def test_empty_registry_is_respected(self, empty_registry):
        """An explicit empty registry is not replaced by the default."""
        assert not SHA256.available(empty_registry)
        with pytest.raises(UnavailableAlgorithmError):
            SHA256.hash(empty_registry)

    @pytest.mark.parametrize(
        "alg,size",
        [(SHA256, 32), (SHA384, 48), (SHA512, 64), (BLAKE3, 32)],
    )
    def test_size(self, alg, size):
        assert alg.size() == size


class TestEncode:
    """Tests for encode_digest."""

    def test_hex_is_lowercase(self):
        assert SHA256.encode_digest(b"\xab\xcd") == "abcd"

    def test_unregistered_falls_back_to_hex(self, empty_registry):
        assert Algorithm("anything").encode_digest(b"\x01\xff", empty_registry) == "01ff"


class TestValidate:
    """Tests for Algorithm.validate."""

    def test_valid_length(self):
        assert SHA256.validate("a" * 64) is None

    @pytest.mark.parametrize("length", [0, 63, 65, 128])
    def test_wrong_length(self, length):
        with pytest.raises(InvalidDigestLengthError) as exc_info:
            SHA256.validate("a" * length)
        assert exc_info.value.context["expected"] == 64
        assert exc_info.value.context["actual"] == length

    def test_unsupported(self):
        with pytest.raises(UnsupportedDigestError):
            Algorithm("md5").validate("a" * 32)

    def test_zero_length_disables_check(self, registry):
        """Algorithms registered without a length accept any length."""
        registry.register("sha256-test", hashlib.sha256)
        Algorithm("sha256-test").validate("abc", registry)
        Algorithm("sha256-test").validate("a" * 500, registry)

    def test_charset_not_checked(self):
        """Only the length is checked at this level."""
        SHA256.validate("!" * 64)


class TestFromName:
    """Tests for Algorithm.from_name."""

    def test_registered(self):
        alg = Algorithm.from_name("sha512")
        assert alg == SHA512
        assert isinstance(alg, Algorithm)

    @pytest.mark.parametrize("name", ["bean", "SHA256", ""])
    def test_unregistered(self, name):
        with pytest.raises(UnsupportedDigestError):
            Algorithm.from_name(name)

    def test_uses_given_registry(self, empty_registry):
        with pytest.raises(UnsupportedDigestError):
            Algorithm.from_name("sha256", empty_registry)
