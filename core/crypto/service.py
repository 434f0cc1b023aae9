"""
Module 07 - Signature Service
Long-lived holder of the signing configuration.

Owner: Protocol/Crypto Engineer
Module ID: M07

A SignatureService is built once at process start from a SigningConfig and
shared by every caller. It resolves the configured scheme and hash
algorithm up front (unknown names fail here, not per call) and keeps no
mutable state, so one instance can serve any number of concurrent callers.

Usage:
    service = SignatureService(SigningConfig(scheme="ed25519"))
    keys = service.generate_keypair()
    digest = service.hash({"msg": "hello world"})
    signature = service.sign(digest, keys.sk)
    assert service.verify(digest, signature, keys.pk)
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from core.config.runtime import SigningConfig
from core.crypto.encoding import parse_hex
from core.crypto.hashing import get_hash_algorithm, hash_payload
from core.crypto.keys import (
    EntropySource,
    derive_keypair,
    generate_keypair as _generate_keypair,
    system_entropy,
)
from core.crypto.signatures import sign_digest as _sign_digest
from core.crypto.signatures import verify_signature as _verify_signature
from core.crypto.suites import get_suite
from core.crypto.types import KeyPair

logger = logging.getLogger(__name__)


class SignatureService:
    """The four signing operations bound to one configuration."""

    def __init__(
        self,
        config: Optional[SigningConfig] = None,
        entropy_source: EntropySource = system_entropy,
    ) -> None:
        self.config = config or SigningConfig()
        self.suite = get_suite(self.config.scheme)
        self.hash_algorithm = get_hash_algorithm(self.config.hash_algorithm)
        self._entropy_source = entropy_source
        logger.info(
            "Signature service ready: scheme=%s curve=%s hash=%s",
            self.suite.name,
            self.suite.curve_name,
            self.hash_algorithm.name,
        )

    def generate_keypair(self, entropy: Optional[bytes] = None) -> KeyPair:
        """KeyGen: a fresh key pair (deterministic only when ``entropy`` is given)."""
        return _generate_keypair(
            self.suite, entropy=entropy, entropy_source=self._entropy_source
        )

    def derive_keypair(self, private_key_hex: Any) -> KeyPair:
        """The key pair for an existing hex private key."""
        return derive_keypair(self.suite, parse_hex(private_key_hex, "sk"))

    def hash(self, payload: Any) -> str:
        """Hasher: hex digest of a payload."""
        return hash_payload(payload, self.hash_algorithm).hex

    def sign(self, digest_hex: Any, private_key_hex: Any) -> str:
        """Signer: hex signature of a hex digest."""
        return _sign_digest(self.suite, self.hash_algorithm, digest_hex, private_key_hex).hex

    def verify(self, digest_hex: Any, signature_hex: Any, public_key_hex: Any) -> bool:
        """Verifier: whether the signature is valid. Raises only on malformed input."""
        return _verify_signature(
            self.suite, self.hash_algorithm, digest_hex, signature_hex, public_key_hex
        )

    def describe(self) -> dict[str, Any]:
        """The configured scheme, curve, hash algorithm and encodings."""
        info = self.suite.describe()
        info["hash_algorithm"] = self.hash_algorithm.name
        info["digest_size"] = self.hash_algorithm.digest_size
        return info

    def __repr__(self) -> str:
        return (
            f"SignatureService(scheme={self.suite.name!r}, "
            f"hash_algorithm={self.hash_algorithm.name!r})"
        )


# =============================================================================
# Functional API (explicit configuration, no module-level context)
# =============================================================================

def generate_keypair(config: SigningConfig, entropy: Optional[bytes] = None) -> KeyPair:
    return SignatureService(config).generate_keypair(entropy=entropy)


def hash_message(config: SigningConfig, payload: Any) -> str:
    return SignatureService(config).hash(payload)


def sign_digest(config: SigningConfig, digest_hex: Any, private_key_hex: Any) -> str:
    return SignatureService(config).sign(digest_hex, private_key_hex)


def verify_signature(
    config: SigningConfig, digest_hex: Any, signature_hex: Any, public_key_hex: Any
) -> bool:
    return SignatureService(config).verify(digest_hex, signature_hex, public_key_hex)


__all__ = [
    "SignatureService",
    "generate_keypair",
    "hash_message",
    "sign_digest",
    "verify_signature",
]
