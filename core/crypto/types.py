"""
Typed domain values for the signing core.

Opaque hex strings never reach curve arithmetic: they are parsed into these
immutable values first (see core.crypto.encoding). Key values wrap the
`cryptography` key objects for the configured suite and keep the raw bytes
out of their repr.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from core.schemas.errors import InvalidInputError

DIGEST_SIZE = 32


@dataclass(frozen=True)
class Digest:
    """Fixed-length digest of a payload."""

    value: bytes

    def __post_init__(self):
        if len(self.value) != DIGEST_SIZE:
            raise InvalidInputError(
                f"Digest must be {DIGEST_SIZE} bytes, got {len(self.value)}",
                field="hash",
            )

    @property
    def hex(self) -> str:
        return self.value.hex()


@dataclass(frozen=True)
class SignatureBytes:
    """An encoded signature whose structure has been checked for its scheme."""

    scheme: str
    value: bytes

    @property
    def hex(self) -> str:
        return self.value.hex()


@dataclass(frozen=True)
class PrivateScalar:
    """A private key that is a valid scalar for the suite's curve."""

    scheme: str
    key: Any = field(repr=False)
    raw: bytes = field(repr=False)

    @property
    def hex(self) -> str:
        return self.raw.hex()


@dataclass(frozen=True)
class PublicPoint:
    """A public key that decodes to a point on the suite's curve."""

    scheme: str
    key: Any = field(repr=False)
    raw: bytes

    @property
    def hex(self) -> str:
        return self.raw.hex()


@dataclass(frozen=True)
class KeyPair:
    """Private scalar and the public point derived from it."""

    private_key: PrivateScalar
    public_key: PublicPoint

    @property
    def sk(self) -> str:
        return self.private_key.hex

    @property
    def pk(self) -> str:
        return self.public_key.hex

    def to_dict(self) -> dict[str, str]:
        return {"sk": self.sk, "pk": self.pk}


__all__ = [
    "DIGEST_SIZE",
    "Digest",
    "KeyPair",
    "PrivateScalar",
    "PublicPoint",
    "SignatureBytes",
]
