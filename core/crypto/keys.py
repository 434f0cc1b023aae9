"""
Module 05 - Key Generation
KeyGen: fresh key pairs on the configured curve.

Owner: Protocol/Crypto Engineer
Module ID: M05

Entropy is drawn from the OS CSPRNG (`secrets.token_bytes`, thread-safe)
unless a caller injects a source or fixed entropy for testing. An entropy
source that fails or returns short reads raises EntropyFailure; there is
no fallback to a weaker generator.
"""
from __future__ import annotations

import logging
import secrets
from typing import Callable, Optional

from core.crypto.suites import SignatureSuite
from core.crypto.types import KeyPair
from core.schemas.errors import EntropyFailure, InvalidInputError

logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]


def system_entropy(n: int) -> bytes:
    """``n`` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(n)


def draw_entropy(source: EntropySource, n: int) -> bytes:
    """
    Read exactly ``n`` bytes from ``source``.

    Raises:
        EntropyFailure: If the source is unavailable or returns fewer bytes
    """
    try:
        data = source(n)
    except (OSError, NotImplementedError) as e:
        logger.critical("Secure random source unavailable: %s", e)
        raise EntropyFailure(
            "Secure random source unavailable; refusing to generate a key",
            details={"error": str(e)},
        ) from e

    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        got = len(data) if isinstance(data, (bytes, bytearray)) else type(data).__name__
        logger.critical("Entropy source returned %s instead of %d bytes", got, n)
        raise EntropyFailure(
            "Entropy source returned an incomplete read; refusing to generate a key",
            details={"requested": n, "received": got},
        )
    return bytes(data)


def generate_keypair(
    suite: SignatureSuite,
    entropy: Optional[bytes] = None,
    entropy_source: EntropySource = system_entropy,
) -> KeyPair:
    """
    Generate a key pair on ``suite``'s curve.

    Args:
        suite: The configured signature suite
        entropy: Optional fixed entropy (exactly ``suite.entropy_bytes``);
                 makes generation deterministic for tests
        entropy_source: Where to draw entropy when ``entropy`` is None

    Returns:
        A KeyPair whose public key is derived from the private key

    Raises:
        EntropyFailure: If no secure randomness is available
        InvalidInputError: If fixed entropy has the wrong length
    """
    if entropy is None:
        material = draw_entropy(entropy_source, suite.entropy_bytes)
    else:
        if len(entropy) != suite.entropy_bytes:
            raise InvalidInputError(
                f"{suite.name} key generation needs {suite.entropy_bytes} bytes of entropy, "
                f"got {len(entropy)}",
                field="entropy",
            )
        material = bytes(entropy)

    keypair = suite.keypair(suite.private_key_from_entropy(material))
    logger.debug("Generated %s key pair, pk=%s", suite.name, keypair.pk)
    return keypair


def derive_keypair(suite: SignatureSuite, private_key_raw: bytes) -> KeyPair:
    """Rebuild the key pair for an existing private key."""
    return suite.keypair(suite.load_private_key(private_key_raw))


__all__ = [
    "EntropySource",
    "derive_keypair",
    "draw_entropy",
    "generate_keypair",
    "system_entropy",
]
