"""
Module 03 - Encoding Boundary
Hex parsing and validation for every operation input.

Owner: Protocol/Crypto Engineer
Module ID: M03

Each parser turns an opaque string into a typed value or raises:
- InvalidInputError: absent, non-hex, odd length, wrong digest/signature shape
- InvalidKeyError: hex is fine but the key is not valid for the curve

Hex rules:
- Case-insensitive, surrounding whitespace ignored
- Optional 0x prefix accepted on input
- Output is always lowercase without prefix
"""
from __future__ import annotations

import binascii
from typing import TYPE_CHECKING, Any

from core.crypto.types import (
    DIGEST_SIZE,
    Digest,
    PrivateScalar,
    PublicPoint,
    SignatureBytes,
)
from core.schemas.errors import InvalidInputError

if TYPE_CHECKING:
    from core.crypto.suites import SignatureSuite


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hex string (no prefix).

    Example:
        >>> to_hex(bytes.fromhex("DEADBEEF"))
        'deadbeef'
    """
    return data.hex()


def parse_hex(value: Any, field: str) -> bytes:
    """
    Decode a hex string field into bytes.

    Args:
        value: The raw field value
        field: Field name for error reporting

    Raises:
        InvalidInputError: If the value is absent, not a string, empty,
                           odd-length, or contains non-hex characters
    """
    if value is None:
        raise InvalidInputError(f"Field '{field}' is required", field=field)
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Field '{field}' must be a hex string, got {type(value).__name__}",
            field=field,
        )

    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]

    if not text:
        raise InvalidInputError(f"Field '{field}' is empty", field=field)
    if len(text) % 2 != 0:
        raise InvalidInputError(
            f"Field '{field}' must have an even number of hex digits, got {len(text)}",
            field=field,
        )

    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(
            f"Field '{field}' contains non-hex characters",
            field=field,
        ) from e


def parse_digest(value: Any, field: str = "hash") -> Digest:
    """Parse a hex digest; must decode to exactly DIGEST_SIZE bytes."""
    raw = parse_hex(value, field)
    if len(raw) != DIGEST_SIZE:
        raise InvalidInputError(
            f"Field '{field}' must be {DIGEST_SIZE} bytes ({DIGEST_SIZE * 2} hex digits), "
            f"got {len(raw)} bytes",
            field=field,
        )
    return Digest(raw)


def parse_private_key(value: Any, suite: "SignatureSuite", field: str = "sk") -> PrivateScalar:
    """Parse a hex private key into a scalar valid for ``suite``."""
    return suite.load_private_key(parse_hex(value, field), field=field)


def parse_public_key(value: Any, suite: "SignatureSuite", field: str = "pk") -> PublicPoint:
    """Parse a hex public key into a point on ``suite``'s curve."""
    return suite.load_public_key(parse_hex(value, field), field=field)


def parse_signature(value: Any, suite: "SignatureSuite", field: str = "signature") -> SignatureBytes:
    """Parse a hex signature and check its structure for ``suite``."""
    return suite.load_signature(parse_hex(value, field), field=field)


__all__ = [
    "parse_digest",
    "parse_hex",
    "parse_private_key",
    "parse_public_key",
    "parse_signature",
    "to_hex",
]
