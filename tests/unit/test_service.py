"""
Module 07 - SignatureService Tests
"""

import pytest

from core.config.runtime import SigningConfig
from core.crypto import (
    SignatureService,
    generate_keypair,
    hash_message,
    sign_digest,
    verify_signature,
)
from core.schemas.errors import ConfigurationError

from fixtures.vectors import GOLDEN_HASH, GOLDEN_PAYLOAD, RFC8032_PK, RFC8032_SK


class TestConstruction:

    def test_defaults(self):
        service = SignatureService()
        assert service.suite.name == "ed25519"
        assert service.hash_algorithm.name == "sha256"

    def test_names_are_normalized(self):
        service = SignatureService(SigningConfig(scheme=" ECDSA-P256 ", hash_algorithm="SHA3-256"))
        assert service.suite.name == "ecdsa-p256"
        assert service.hash_algorithm.name == "sha3-256"

    def test_unknown_scheme_fails_at_startup(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SignatureService(SigningConfig(scheme="rsa"))
        assert exc_info.value.fatal is True
        assert "ed25519" in exc_info.value.details["supported"]

    def test_unknown_hash_fails_at_startup(self):
        with pytest.raises(ConfigurationError):
            SignatureService(SigningConfig(hash_algorithm="md5"))

    def test_config_is_immutable(self):
        config = SigningConfig()
        with pytest.raises(AttributeError):
            config.scheme = "ecdsa-p256"

    def test_repr(self, service):
        assert repr(service) == "SignatureService(scheme='ed25519', hash_algorithm='sha256')"


class TestDescribe:

    def test_ed25519(self, service):
        info = service.describe()
        assert info["scheme"] == "ed25519"
        assert info["curve"] == "edwards25519"
        assert info["hash_algorithm"] == "sha256"
        assert info["digest_size"] == 32

    def test_ecdsa_lists_accepted_encodings(self):
        info = SignatureService(SigningConfig(scheme="ecdsa-secp256k1")).describe()
        assert info["curve"] == "secp256k1"
        assert "SEC1 compressed point" in info["public_key_encodings_accepted"]


class TestHashAlgorithmChoice:

    def test_sha3_service_hashes_with_sha3(self):
        service = SignatureService(SigningConfig(hash_algorithm="sha3-256"))
        assert service.hash(GOLDEN_PAYLOAD) == (
            "17da2b80855b99cd0bf1899ec41df937a2292b632f7cd7b89b4e48aa597b94cf"
        )

    @pytest.mark.parametrize("scheme", ["ecdsa-secp256k1", "ecdsa-p256"])
    def test_ecdsa_with_sha3(self, scheme):
        service = SignatureService(SigningConfig(scheme=scheme, hash_algorithm="sha3-256"))
        keypair = service.generate_keypair()
        digest = service.hash(GOLDEN_PAYLOAD)
        assert service.verify(digest, service.sign(digest, keypair.sk), keypair.pk)


class TestFunctionalApi:
    """Module-level helpers take the configuration explicitly."""

    def test_hash_message(self, signing_config):
        assert hash_message(signing_config, GOLDEN_PAYLOAD) == GOLDEN_HASH

    def test_generate_with_entropy(self, signing_config):
        keypair = generate_keypair(signing_config, entropy=bytes.fromhex(RFC8032_SK))
        assert keypair.pk == RFC8032_PK

    def test_sign_and_verify(self, signing_config):
        signature = sign_digest(signing_config, GOLDEN_HASH, RFC8032_SK)
        assert verify_signature(signing_config, GOLDEN_HASH, signature, RFC8032_PK) is True
