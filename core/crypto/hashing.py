"""
Module 02 - Hashing Utilities
The Hasher: fixed-length digests of arbitrary payloads.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- The registry of supported 32-byte digest algorithms
- Payload canonicalization into bytes (the hash contract)
- Hashing of payloads into typed Digest values

Canonicalization rules (part of the digest contract):
- bytes  -> hashed as-is
- str    -> UTF-8 bytes, no quoting
- other  -> canonical JSON (sorted keys, no whitespace, UTF-8)

Security/Determinism Notes:
- Always hash raw bytes exactly as produced above
- No auto-stripping of whitespace in text payloads
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Callable

from cryptography.hazmat.primitives import hashes

from core.crypto.types import DIGEST_SIZE, Digest
from core.schemas.canonical import canonical_bytes
from core.schemas.errors import (
    CanonicalizationException,
    ConfigurationError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HashAlgorithm:
    """A named digest algorithm producing DIGEST_SIZE bytes."""

    name: str
    hashlib_name: str
    prehash: Callable[[], hashes.HashAlgorithm]
    digest_size: int = DIGEST_SIZE

    def digest(self, data: bytes) -> bytes:
        return hashlib.new(self.hashlib_name, data).digest()


HASH_ALGORITHMS: dict[str, HashAlgorithm] = {
    "sha256": HashAlgorithm(name="sha256", hashlib_name="sha256", prehash=hashes.SHA256),
    "sha3-256": HashAlgorithm(name="sha3-256", hashlib_name="sha3_256", prehash=hashes.SHA3_256),
}


def get_hash_algorithm(name: str) -> HashAlgorithm:
    """
    Resolve a configured hash algorithm name.

    Raises:
        ConfigurationError: If the name is not a supported algorithm
    """
    try:
        return HASH_ALGORITHMS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported hash algorithm: {name!r}",
            details={"supported": sorted(HASH_ALGORITHMS)},
        ) from None


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def payload_bytes(payload: Any) -> bytes:
    """
    Convert a payload into the exact bytes that get hashed.

    Args:
        payload: bytes, str, or any canonically serializable object
                 (dict, list, number, bool, Pydantic model)

    Returns:
        The canonical byte representation

    Raises:
        InvalidInputError: If the payload is absent or cannot be
                           canonically serialized
    """
    if payload is None:
        raise InvalidInputError("Payload is required", field="msg")

    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)

    if isinstance(payload, str):
        return payload.encode("utf-8")

    try:
        return canonical_bytes(payload)
    except CanonicalizationException as e:
        raise InvalidInputError(
            f"Payload cannot be canonically serialized: {e.message}",
            field="msg",
            details=e.details,
        ) from e


def hash_payload(payload: Any, algorithm: HashAlgorithm | str = "sha256") -> Digest:
    """
    Hash a payload into a Digest.

    Same payload in, same digest out, always.

    Example:
        >>> hash_payload({"msg": "hello world"}).hex
        'b7a36c52572fa7e7222335d1e13944ebaa4d58491636feb39734f299d7195bbb'
    """
    if isinstance(algorithm, str):
        algorithm = get_hash_algorithm(algorithm)
    data = payload_bytes(payload)
    digest = Digest(algorithm.digest(data))
    logger.debug("Hashed %d payload bytes with %s", len(data), algorithm.name)
    return digest


__all__ = [
    "HASH_ALGORITHMS",
    "HashAlgorithm",
    "get_hash_algorithm",
    "hash_payload",
    "payload_bytes",
    "sha256",
]
