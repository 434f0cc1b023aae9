"""
Module 02 - Hashing Unit Tests
Tests for core/crypto/hashing.py

Tests:
- golden digest of the canonical {"msg": "hello world"} payload
- payload canonicalization rules (bytes, text, structured)
- determinism and key-order independence
- absent / non-canonicalizable payloads are InvalidInput
"""
import hashlib
from datetime import datetime, timezone

import pytest

from core.crypto.hashing import (
    HASH_ALGORITHMS,
    get_hash_algorithm,
    hash_payload,
    payload_bytes,
    sha256,
)
from core.crypto.types import Digest
from core.schemas.errors import ConfigurationError, InvalidInputError

from fixtures.vectors import (
    EMPTY_SHA256,
    GOLDEN_HASH,
    GOLDEN_PAYLOAD,
    HELLO_SHA256,
    HELLO_WORLD_SHA256,
)


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """Test sha256 produces correct hash for known input."""
        result = sha256(b"hello")

        assert result.hex() == HELLO_SHA256
        assert len(result) == 32

    def test_sha256_empty_bytes(self):
        """Test sha256 of empty bytes."""
        assert sha256(b"").hex() == EMPTY_SHA256


class TestPayloadBytes:
    """Tests for the payload canonicalization rules."""

    def test_bytes_are_hashed_as_is(self):
        assert payload_bytes(b"\x00\x01raw") == b"\x00\x01raw"

    def test_bytearray_is_accepted(self):
        assert payload_bytes(bytearray(b"abc")) == b"abc"

    def test_text_is_utf8_without_quotes(self):
        assert payload_bytes("héllo") == "héllo".encode("utf-8")

    def test_dict_is_canonical_json(self):
        assert payload_bytes({"b": 2, "a": 1}) == b'{"a":1,"b":2}'

    def test_list_and_scalars_are_canonical_json(self):
        assert payload_bytes([1, "two", True]) == b'[1,"two",true]'
        assert payload_bytes(42) == b"42"
        assert payload_bytes(False) == b"false"

    def test_datetime_inside_payload(self):
        payload = {"at": datetime(2026, 1, 27, 21, 35, tzinfo=timezone.utc)}
        assert payload_bytes(payload) == b'{"at":"2026-01-27T21:35:00Z"}'

    def test_none_is_invalid_input(self):
        with pytest.raises(InvalidInputError) as exc_info:
            payload_bytes(None)
        assert exc_info.value.field == "msg"

    def test_nan_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            payload_bytes({"value": float("nan")})

    def test_unsupported_type_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            payload_bytes({"value": object()})


class TestHashPayload:
    """Tests for hash_payload()."""

    def test_golden_digest(self):
        """{"msg": "hello world"} hashes to a fixed known value."""
        assert hash_payload(GOLDEN_PAYLOAD).hex == GOLDEN_HASH

    def test_text_digest_matches_hashlib(self):
        assert hash_payload("hello world").hex == HELLO_WORLD_SHA256

    def test_returns_digest(self):
        digest = hash_payload("hello")
        assert isinstance(digest, Digest)
        assert len(digest.value) == 32

    def test_deterministic_across_calls(self):
        payload = {"id": "doc-123", "values": [1, 2, 3], "nested": {"a": "b"}}
        results = {hash_payload(payload).hex for _ in range(10)}
        assert len(results) == 1

    def test_stable_for_key_order(self):
        dict1 = {"zebra": 1, "apple": 2, "mango": 3}
        dict2 = {"apple": 2, "mango": 3, "zebra": 1}
        assert hash_payload(dict1) == hash_payload(dict2)

    def test_list_order_matters(self):
        assert hash_payload({"items": [3, 1, 2]}) != hash_payload({"items": [1, 2, 3]})

    def test_different_payloads_different_digests(self):
        assert hash_payload({"key": "value1"}) != hash_payload({"key": "value2"})

    def test_text_and_json_string_differ(self):
        """A str is hashed as text, not as a quoted JSON string."""
        assert hash_payload("hello").hex != hashlib.sha256(b'"hello"').hexdigest()

    def test_sha3_256(self):
        assert hash_payload(b"", "sha3-256").hex == (
            "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
        )

    def test_sha3_golden_payload(self):
        assert hash_payload(GOLDEN_PAYLOAD, "sha3-256").hex == (
            "17da2b80855b99cd0bf1899ec41df937a2292b632f7cd7b89b4e48aa597b94cf"
        )


class TestHashAlgorithms:
    """Tests for the algorithm registry."""

    def test_all_algorithms_produce_32_bytes(self):
        for algorithm in HASH_ALGORITHMS.values():
            assert len(algorithm.digest(b"x")) == 32
            assert algorithm.prehash().digest_size == 32

    def test_lookup_is_case_insensitive(self):
        assert get_hash_algorithm("SHA256").name == "sha256"

    def test_unknown_algorithm_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_hash_algorithm("md5")
        assert "sha256" in exc_info.value.details["supported"]
