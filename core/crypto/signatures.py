"""
Module 06 - Signatures
Signer and Verifier over typed inputs.

Owner: Protocol/Crypto Engineer
Module ID: M06

Both operations parse every hex input before any curve arithmetic runs.
Verification returns a bool: a well-formed signature that does not verify
is an answer, not an error. Only malformed encodings raise.
"""
from __future__ import annotations

import logging
from typing import Any

from core.crypto.encoding import (
    parse_digest,
    parse_private_key,
    parse_public_key,
    parse_signature,
)
from core.crypto.hashing import HashAlgorithm
from core.crypto.suites import SignatureSuite
from core.crypto.types import SignatureBytes

logger = logging.getLogger(__name__)


def sign_digest(
    suite: SignatureSuite,
    hash_algorithm: HashAlgorithm,
    digest_hex: Any,
    private_key_hex: Any,
) -> SignatureBytes:
    """
    Sign a hex digest with a hex private key.

    Raises:
        InvalidInputError: Malformed digest or non-hex key
        InvalidKeyError: Key is hex but not a valid scalar for the curve
    """
    digest = parse_digest(digest_hex)
    private_key = parse_private_key(private_key_hex, suite)
    signature = suite.sign(digest, private_key, hash_algorithm)
    logger.debug("Signed digest %s with %s", digest.hex, suite.name)
    return signature


def verify_signature(
    suite: SignatureSuite,
    hash_algorithm: HashAlgorithm,
    digest_hex: Any,
    signature_hex: Any,
    public_key_hex: Any,
) -> bool:
    """
    Verify a hex signature over a hex digest against a hex public key.

    Returns:
        True iff the signature is valid for (digest, public key)

    Raises:
        InvalidInputError: Malformed digest, signature, or non-hex key
        InvalidKeyError: Public key is not a point on the curve
    """
    digest = parse_digest(digest_hex)
    signature = parse_signature(signature_hex, suite)
    public_key = parse_public_key(public_key_hex, suite)
    valid = suite.verify(digest, signature, public_key, hash_algorithm)
    logger.debug("Verified digest %s against pk %s: %s", digest.hex, public_key.hex, valid)
    return valid


__all__ = ["sign_digest", "verify_signature"]
