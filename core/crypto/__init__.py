"""
Core cryptographic operations.

KeyGen, Hasher, Signer and Verifier, plus the encoding boundary and the
curve suites behind them.
"""
from .hashing import (
    HASH_ALGORITHMS,
    get_hash_algorithm,
    hash_payload,
    payload_bytes,
    sha256,
)
from .encoding import (
    parse_digest,
    parse_hex,
    parse_private_key,
    parse_public_key,
    parse_signature,
    to_hex,
)
from .suites import SUITES, SignatureSuite, get_suite
from .types import (
    DIGEST_SIZE,
    Digest,
    KeyPair,
    PrivateScalar,
    PublicPoint,
    SignatureBytes,
)
from .service import (
    SignatureService,
    generate_keypair,
    hash_message,
    sign_digest,
    verify_signature,
)

__all__ = [
    "DIGEST_SIZE",
    "Digest",
    "HASH_ALGORITHMS",
    "KeyPair",
    "PrivateScalar",
    "PublicPoint",
    "SUITES",
    "SignatureBytes",
    "SignatureService",
    "SignatureSuite",
    "generate_keypair",
    "get_hash_algorithm",
    "get_suite",
    "hash_message",
    "hash_payload",
    "parse_digest",
    "parse_hex",
    "parse_private_key",
    "parse_public_key",
    "parse_signature",
    "payload_bytes",
    "sha256",
    "sign_digest",
    "to_hex",
    "verify_signature",
]
