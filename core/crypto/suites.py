"""
Module 04 - Signature Suites
Curve engines behind KeyGen, Signer and Verifier.

Owner: Protocol/Crypto Engineer
Module ID: M04

A suite binds one named scheme to:
- its curve and signature algorithm
- the fixed private key, public key and signature encodings
- the number of entropy bytes KeyGen draws

Supported schemes:
- ed25519           EdDSA (RFC 8032) over the 32-byte digest; raw R||S signature
- ecdsa-secp256k1   ECDSA over the prehashed digest; DER SEQUENCE{r, s} signature
- ecdsa-p256        same, over NIST P-256

All scalar arithmetic is done by the `cryptography` package (OpenSSL),
which keeps signing constant-time with respect to the private key.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    decode_dss_signature,
    encode_dss_signature,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from core.crypto import edwards
from core.crypto.hashing import HashAlgorithm
from core.crypto.types import (
    Digest,
    KeyPair,
    PrivateScalar,
    PublicPoint,
    SignatureBytes,
)
from core.schemas.errors import (
    ConfigurationError,
    InvalidInputError,
    InvalidKeyError,
)

logger = logging.getLogger(__name__)


class SignatureSuite(ABC):
    """Base class for a named curve + signature algorithm."""

    name: str
    curve_name: str
    private_key_size: int
    entropy_bytes: int
    private_key_encoding: str
    public_key_encoding: str
    signature_encoding: str

    @abstractmethod
    def private_key_from_entropy(self, entropy: bytes) -> PrivateScalar:
        """Derive a private scalar from exactly ``entropy_bytes`` random bytes."""

    @abstractmethod
    def load_private_key(self, raw: bytes, field: str = "sk") -> PrivateScalar:
        """Validate raw private key bytes as a scalar for this curve."""

    @abstractmethod
    def load_public_key(self, raw: bytes, field: str = "pk") -> PublicPoint:
        """Validate raw public key bytes as a point on this curve."""

    @abstractmethod
    def load_signature(self, raw: bytes, field: str = "signature") -> SignatureBytes:
        """Check the structure of an encoded signature."""

    @abstractmethod
    def public_key_of(self, private_key: PrivateScalar) -> PublicPoint:
        """Base-point multiplication: the public key for a private scalar."""

    @abstractmethod
    def sign(
        self, digest: Digest, private_key: PrivateScalar, hash_algorithm: HashAlgorithm
    ) -> SignatureBytes:
        """Sign a digest."""

    @abstractmethod
    def verify(
        self,
        digest: Digest,
        signature: SignatureBytes,
        public_key: PublicPoint,
        hash_algorithm: HashAlgorithm,
    ) -> bool:
        """Return True iff the verification equation holds."""

    def keypair(self, private_key: PrivateScalar) -> KeyPair:
        return KeyPair(private_key=private_key, public_key=self.public_key_of(private_key))

    def describe(self) -> dict[str, Any]:
        return {
            "scheme": self.name,
            "curve": self.curve_name,
            "private_key_encoding": self.private_key_encoding,
            "public_key_encoding": self.public_key_encoding,
            "signature_encoding": self.signature_encoding,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


# =============================================================================
# Ed25519
# =============================================================================

class Ed25519Suite(SignatureSuite):
    """
    Pure Ed25519 (RFC 8032) applied to the digest bytes.

    Signatures are deterministic for a given (digest, key).
    """

    name = "ed25519"
    curve_name = "edwards25519"
    private_key_size = 32
    entropy_bytes = 32
    signature_size = 64
    private_key_encoding = "raw 32-byte seed"
    public_key_encoding = "raw 32-byte compressed point"
    signature_encoding = "raw 64-byte R||S"

    def private_key_from_entropy(self, entropy: bytes) -> PrivateScalar:
        return self.load_private_key(entropy)

    def load_private_key(self, raw: bytes, field: str = "sk") -> PrivateScalar:
        if len(raw) != self.private_key_size:
            raise InvalidKeyError(
                f"Ed25519 private key must be {self.private_key_size} bytes, got {len(raw)}",
                field=field,
            )
        key = Ed25519PrivateKey.from_private_bytes(raw)
        return PrivateScalar(scheme=self.name, key=key, raw=raw)

    def load_public_key(self, raw: bytes, field: str = "pk") -> PublicPoint:
        if len(raw) != edwards.ENCODED_POINT_SIZE:
            raise InvalidKeyError(
                f"Ed25519 public key must be {edwards.ENCODED_POINT_SIZE} bytes, got {len(raw)}",
                field=field,
            )
        try:
            point = edwards.decode_point(raw)
            key = Ed25519PublicKey.from_public_bytes(raw)
        except ValueError as e:
            raise InvalidKeyError(
                f"Public key is not a point on {self.curve_name}: {e}",
                field=field,
            ) from e
        if edwards.has_small_order(point):
            raise InvalidKeyError(
                "Public key is a small-order point on edwards25519",
                field=field,
            )
        return PublicPoint(scheme=self.name, key=key, raw=raw)

    def load_signature(self, raw: bytes, field: str = "signature") -> SignatureBytes:
        if len(raw) != self.signature_size:
            raise InvalidInputError(
                f"Ed25519 signature must be {self.signature_size} bytes, got {len(raw)}",
                field=field,
            )
        return SignatureBytes(scheme=self.name, value=raw)

    def public_key_of(self, private_key: PrivateScalar) -> PublicPoint:
        public = private_key.key.public_key()
        raw = public.public_bytes(Encoding.Raw, PublicFormat.Raw)
        return PublicPoint(scheme=self.name, key=public, raw=raw)

    def sign(
        self, digest: Digest, private_key: PrivateScalar, hash_algorithm: HashAlgorithm
    ) -> SignatureBytes:
        return SignatureBytes(scheme=self.name, value=private_key.key.sign(digest.value))

    def verify(
        self,
        digest: Digest,
        signature: SignatureBytes,
        public_key: PublicPoint,
        hash_algorithm: HashAlgorithm,
    ) -> bool:
        try:
            public_key.key.verify(signature.value, digest.value)
        except InvalidSignature:
            return False
        return True


# =============================================================================
# ECDSA
# =============================================================================

class EcdsaSuite(SignatureSuite):
    """
    ECDSA over a short-Weierstrass curve, signing the digest as a prehash.

    Private keys are fixed-width big-endian scalars in [1, n-1]. Public keys
    are SEC1 points (uncompressed on output, compressed also accepted).
    Signatures are DER sequences of the two scalars (r, s) and are
    randomized.
    """

    private_key_encoding = "raw big-endian scalar"
    public_key_encoding = "SEC1 uncompressed point"
    signature_encoding = "DER SEQUENCE{INTEGER r, INTEGER s}"

    def __init__(self, name: str, curve: ec.EllipticCurve, order: int) -> None:
        self.name = name
        self.curve = curve
        self.curve_name = curve.name
        self.order = order
        self.private_key_size = (curve.key_size + 7) // 8
        # FIPS 186-4 B.4.1: 64 extra bits so the reduction below is unbiased
        self.entropy_bytes = self.private_key_size + 8
        self._compressed_size = 1 + self.private_key_size
        self._uncompressed_size = 1 + 2 * self.private_key_size

    def _scalar(self, value: int) -> PrivateScalar:
        key = ec.derive_private_key(value, self.curve)
        raw = value.to_bytes(self.private_key_size, "big")
        return PrivateScalar(scheme=self.name, key=key, raw=raw)

    def private_key_from_entropy(self, entropy: bytes) -> PrivateScalar:
        c = int.from_bytes(entropy, "big")
        return self._scalar(c % (self.order - 1) + 1)

    def load_private_key(self, raw: bytes, field: str = "sk") -> PrivateScalar:
        if len(raw) != self.private_key_size:
            raise InvalidKeyError(
                f"{self.curve_name} private key must be {self.private_key_size} bytes, "
                f"got {len(raw)}",
                field=field,
            )
        value = int.from_bytes(raw, "big")
        if not 1 <= value < self.order:
            raise InvalidKeyError(
                f"Private key is not a scalar in [1, n-1] for {self.curve_name}",
                field=field,
            )
        return self._scalar(value)

    def load_public_key(self, raw: bytes, field: str = "pk") -> PublicPoint:
        if len(raw) not in (self._compressed_size, self._uncompressed_size):
            raise InvalidKeyError(
                f"{self.curve_name} public key must be a {self._compressed_size}-byte "
                f"compressed or {self._uncompressed_size}-byte uncompressed SEC1 point, "
                f"got {len(raw)} bytes",
                field=field,
            )
        try:
            key = ec.EllipticCurvePublicKey.from_encoded_point(self.curve, raw)
        except ValueError as e:
            raise InvalidKeyError(
                f"Public key is not a point on {self.curve_name}",
                field=field,
            ) from e
        canonical = key.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)
        return PublicPoint(scheme=self.name, key=key, raw=canonical)

    def load_signature(self, raw: bytes, field: str = "signature") -> SignatureBytes:
        try:
            r, s = decode_dss_signature(raw)
            canonical = encode_dss_signature(r, s)
        except ValueError as e:
            raise InvalidInputError(
                "Signature is not a DER sequence of two integers",
                field=field,
            ) from e
        if canonical != raw:
            raise InvalidInputError(
                "Signature is not canonically DER encoded",
                field=field,
            )
        return SignatureBytes(scheme=self.name, value=raw)

    def public_key_of(self, private_key: PrivateScalar) -> PublicPoint:
        public = private_key.key.public_key()
        raw = public.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)
        return PublicPoint(scheme=self.name, key=public, raw=raw)

    def _algorithm(self, hash_algorithm: HashAlgorithm) -> ec.ECDSA:
        return ec.ECDSA(Prehashed(hash_algorithm.prehash()))

    def sign(
        self, digest: Digest, private_key: PrivateScalar, hash_algorithm: HashAlgorithm
    ) -> SignatureBytes:
        value = private_key.key.sign(digest.value, self._algorithm(hash_algorithm))
        return SignatureBytes(scheme=self.name, value=value)

    def verify(
        self,
        digest: Digest,
        signature: SignatureBytes,
        public_key: PublicPoint,
        hash_algorithm: HashAlgorithm,
    ) -> bool:
        try:
            public_key.key.verify(signature.value, digest.value, self._algorithm(hash_algorithm))
        except InvalidSignature:
            return False
        return True

    def describe(self) -> dict[str, Any]:
        info = super().describe()
        info["public_key_encodings_accepted"] = [
            "SEC1 uncompressed point",
            "SEC1 compressed point",
        ]
        return info


SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
P256_ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

SUITES: dict[str, SignatureSuite] = {
    "ed25519": Ed25519Suite(),
    "ecdsa-secp256k1": EcdsaSuite("ecdsa-secp256k1", ec.SECP256K1(), SECP256K1_ORDER),
    "ecdsa-p256": EcdsaSuite("ecdsa-p256", ec.SECP256R1(), P256_ORDER),
}


def get_suite(name: str) -> SignatureSuite:
    """
    Resolve a configured scheme name.

    Raises:
        ConfigurationError: If the scheme is not supported
    """
    try:
        return SUITES[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported signature scheme: {name!r}",
            details={"supported": sorted(SUITES)},
        ) from None


def export_private_pem(private_key: PrivateScalar) -> str:
    """PKCS#8 PEM of a private key, for handing off to external custody."""
    return private_key.key.private_bytes(
        Encoding.PEM, PrivateFormat.PKCS8, NoEncryption()
    ).decode("ascii")


def export_public_pem(public_key: PublicPoint) -> str:
    """SubjectPublicKeyInfo PEM of a public key."""
    return public_key.key.public_bytes(
        Encoding.PEM, PublicFormat.SubjectPublicKeyInfo
    ).decode("ascii")


__all__ = [
    "SUITES",
    "EcdsaSuite",
    "Ed25519Suite",
    "SignatureSuite",
    "export_private_pem",
    "export_public_pem",
    "get_suite",
]
