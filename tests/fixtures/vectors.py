"""
Known-answer values used across the test suite.

- RFC 8032 section 7.1, TEST 1 (Ed25519 key derivation)
- SEC1 generator points (private scalar 1 maps to G)
- Golden digest of the canonical JSON {"msg":"hello world"}
- Encodings that must be rejected as invalid keys
"""

SCHEMES = ["ed25519", "ecdsa-secp256k1", "ecdsa-p256"]
ECDSA_SCHEMES = ["ecdsa-secp256k1", "ecdsa-p256"]

# RFC 8032 TEST 1
RFC8032_SK = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC8032_PK = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"

# Ed25519 base point
ED25519_BASE_POINT = "5866666666666666666666666666666666666666666666666666666666666666"

# y = 2 has no x on edwards25519
ED25519_OFF_CURVE_PK = "02" + "00" * 31
# y = p, not reduced
ED25519_NONCANONICAL_PK = "ed" + "ff" * 30 + "7f"
# y = 1 gives x = 0; sign bit 1 is invalid
ED25519_NEGATIVE_ZERO_PK = "01" + "00" * 30 + "80"

SCALAR_ONE = "00" * 31 + "01"

GENERATORS = {
    "ecdsa-secp256k1": (
        "04"
        "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
    ),
    "ecdsa-p256": (
        "04"
        "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
        "4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5"
    ),
}

GROUP_ORDERS = {
    "ecdsa-secp256k1": "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141",
    "ecdsa-p256": "ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551",
}

# (x, y) = (1, 1) is on neither curve
SEC1_OFF_CURVE_PK = "04" + "00" * 31 + "01" + "00" * 31 + "01"

GOLDEN_PAYLOAD = {"msg": "hello world"}
GOLDEN_HASH = "b7a36c52572fa7e7222335d1e13944ebaa4d58491636feb39734f299d7195bbb"

HELLO_SHA256 = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
HELLO_WORLD_SHA256 = "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

# Torsion points: [8]P is the identity for each of these
ED25519_IDENTITY_PK = "01" + "00" * 31
ED25519_SMALL_ORDER_PKS = {
    "identity": ED25519_IDENTITY_PK,
    "order-2": "ec" + "ff" * 30 + "7f",
    "order-4": "00" * 32,
    "order-8a": "c7176a703d4dd84fba3c0b760d10670f2a2053fa2c39ccc64ec7fd7792ac037a",
    "order-8b": "26e8958fc2b227b045c3f489f2ef98f0d5dfac05d3c63339b13802886d53fc05",
}
# R = identity, S = 0
ED25519_IDENTITY_FORGERY = ED25519_IDENTITY_PK + "00" * 32
