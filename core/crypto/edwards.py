"""
Edwards25519 point decoding (RFC 8032, section 5.1.3).

The `cryptography` package accepts any 32 bytes as an Ed25519 public key
and only fails later, at verification time. Public keys are decoded here
first so that an encoding which is not a point on the curve is rejected as
an invalid key instead of silently producing `valid: false`. Points of
small order (the eight torsion points) are rejected the same way.

Only public data passes through this module; it does no secret-dependent
arithmetic.
"""
from __future__ import annotations

P = 2**255 - 19
D = (-121665 * pow(121666, P - 2, P)) % P
SQRT_M1 = pow(2, (P - 1) // 4, P)

ENCODED_POINT_SIZE = 32


def decode_point(data: bytes) -> tuple[int, int]:
    """
    Decode a compressed Edwards25519 point into affine (x, y).

    Raises:
        ValueError: If the encoding has the wrong length, y is not reduced
                    mod p, or no x satisfies the curve equation
    """
    if len(data) != ENCODED_POINT_SIZE:
        raise ValueError(f"Encoded point must be {ENCODED_POINT_SIZE} bytes, got {len(data)}")

    y = int.from_bytes(data, "little")
    x_sign = y >> 255
    y &= (1 << 255) - 1
    if y >= P:
        raise ValueError("y coordinate is not reduced modulo p")

    # x^2 = (y^2 - 1) / (d y^2 + 1)
    u = (y * y - 1) % P
    v = (D * y * y + 1) % P
    x = (u * pow(v, 3, P) * pow(u * pow(v, 7, P), (P - 5) // 8, P)) % P

    vxx = (v * x * x) % P
    if vxx == u:
        pass
    elif vxx == (-u) % P:
        x = (x * SQRT_M1) % P
    else:
        raise ValueError("Encoding is not a point on edwards25519")

    if x == 0 and x_sign:
        raise ValueError("Invalid sign bit for x = 0")
    if (x & 1) != x_sign:
        x = P - x

    return x, y


IDENTITY = (0, 1)
COFACTOR_DOUBLINGS = 3


def point_add(p1: tuple[int, int], p2: tuple[int, int]) -> tuple[int, int]:
    """Affine addition on -x^2 + y^2 = 1 + d x^2 y^2 (complete, so no special cases)."""
    x1, y1 = p1
    x2, y2 = p2
    t = (D * x1 * x2 * y1 * y2) % P
    x3 = (x1 * y2 + y1 * x2) * pow((1 + t) % P, P - 2, P)
    y3 = (y1 * y2 + x1 * x2) * pow((1 - t) % P, P - 2, P)
    return x3 % P, y3 % P


def has_small_order(point: tuple[int, int]) -> bool:
    """
    True if [8]point is the identity, i.e. the point lies in the torsion subgroup.

    Such a point is not the public key of any private scalar.    """
    for _ in range(COFACTOR_DOUBLINGS):
        point = point_add(point, point)
    return point == IDENTITY


def is_on_curve(data: bytes) -> bool:
    """True if ``data`` decodes to a point on edwards25519."""
    try:
        decode_point(data)
    except ValueError:
        return False
    return True


__all__ = ["decode_point", "has_small_order", "is_on_curve", "point_add"]
