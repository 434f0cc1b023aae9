"""
Module 09D - API Smoke Tests

Tests for the FastAPI endpoints:
1. GET /health and GET /suite
2. POST /keygen, /hash, /sign, /verify happy paths
3. valid=false is a 200, not an error
4. malformed inputs are 400 INVALID_INPUT, bad keys 400 INVALID_KEY
5. entropy failure is 503 ENTROPY_FAILURE
"""

import inspect
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from core.config.runtime import RuntimeConfig, SigningConfig
from core.crypto.service import SignatureService

from fixtures.vectors import (
    ED25519_IDENTITY_FORGERY,
    ED25519_IDENTITY_PK,
    ED25519_OFF_CURVE_PK,
    GENERATORS,
    GOLDEN_HASH,
    GOLDEN_PAYLOAD,
    HELLO_WORLD_SHA256,
    RFC8032_PK,
    RFC8032_SK,
    SCALAR_ONE,
    SCHEMES,
)


@pytest.fixture
def client():
    return TestClient(create_app(RuntimeConfig()))


@pytest.fixture(params=SCHEMES)
def any_client(request):
    config = RuntimeConfig(signing=SigningConfig(scheme=request.param))
    return TestClient(create_app(config))


# =============================================================================
# Health
# =============================================================================

class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True, "service": "signet-api", "version": "v1"}

    def test_root(self, client):
        assert client.get("/").json()["ok"] is True

    def test_suite(self, client):
        data = client.get("/suite").json()
        assert data["scheme"] == "ed25519"
        assert data["curve"] == "edwards25519"
        assert data["hash_algorithm"] == "sha256"
        assert data["digest_size"] == 32


# =============================================================================
# Happy paths
# =============================================================================

class TestHappyPath:

    def test_hash_golden(self, client):
        response = client.post("/hash", json={"msg": GOLDEN_PAYLOAD})
        assert response.status_code == 200
        assert response.json() == {"ok": True, "hash": GOLDEN_HASH}

    def test_hash_text(self, client):
        assert client.post("/hash", json={"msg": "hello world"}).json()["hash"] == HELLO_WORLD_SHA256

    def test_keygen_sign_verify(self, any_client):
        keys = any_client.post("/keygen").json()
        assert keys["ok"] is True

        digest = any_client.post("/hash", json={"msg": GOLDEN_PAYLOAD}).json()["hash"]
        signed = any_client.post("/sign", json={"hash": digest, "sk": keys["sk"]})
        assert signed.status_code == 200

        verified = any_client.post(
            "/verify",
            json={"hash": digest, "signature": signed.json()["signature"], "pk": keys["pk"]},
        )
        assert verified.status_code == 200
        assert verified.json() == {"ok": True, "valid": True}

    def test_rfc8032_key(self, client):
        signature = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": RFC8032_SK}).json()["signature"]
        response = client.post(
            "/verify", json={"hash": GOLDEN_HASH, "signature": signature, "pk": RFC8032_PK}
        )
        assert response.json()["valid"] is True

    def test_verify_false_is_not_an_error(self, client):
        signature = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": RFC8032_SK}).json()["signature"]
        other_pk = client.post("/keygen").json()["pk"]

        response = client.post(
            "/verify", json={"hash": GOLDEN_HASH, "signature": signature, "pk": other_pk}
        )
        assert response.status_code == 200
        assert response.json() == {"ok": True, "valid": False}


# =============================================================================
# Errors
# =============================================================================

class TestErrors:

    def test_truncated_signature(self, client):
        signature = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": RFC8032_SK}).json()["signature"]
        response = client.post(
            "/verify", json={"hash": GOLDEN_HASH, "signature": signature[:-2], "pk": RFC8032_PK}
        )
        assert response.status_code == 400
        body = response.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "INVALID_INPUT"
        assert body["error"]["details"]["field"] == "signature"

    def test_non_hex_digest(self, client):
        response = client.post("/sign", json={"hash": "hello", "sk": RFC8032_SK})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_off_curve_public_key(self, client):
        signature = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": RFC8032_SK}).json()["signature"]
        response = client.post(
            "/verify",
            json={"hash": GOLDEN_HASH, "signature": signature, "pk": ED25519_OFF_CURVE_PK},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_KEY"

    def test_identity_public_key(self, client):
        response = client.post(
            "/verify",
            json={"hash": GOLDEN_HASH, "signature": ED25519_IDENTITY_FORGERY, "pk": ED25519_IDENTITY_PK},
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_KEY"

    def test_out_of_range_scalar(self):
        client = TestClient(create_app(RuntimeConfig(signing=SigningConfig(scheme="ecdsa-p256"))))
        response = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": "00" * 32})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_KEY"

    def test_missing_fields(self, client):
        response = client.post("/verify", json={"hash": GOLDEN_HASH})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_INPUT"
        assert "signature" in error["details"]["fields"]
        assert "pk" in error["details"]["fields"]

    def test_wrong_field_type(self, client):
        response = client.post("/sign", json={"hash": 123, "sk": RFC8032_SK})
        assert response.status_code == 400

    def test_null_message(self, client):
        response = client.post("/hash", json={"msg": None})
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "msg"

    def test_entropy_failure(self, failing_entropy):
        app = create_app(RuntimeConfig())
        app.state.service = SignatureService(SigningConfig(), entropy_source=failing_entropy)
        client = TestClient(app)

        response = client.post("/keygen")
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "ENTROPY_FAILURE"

    def test_sign_still_works_without_entropy(self, failing_entropy):
        app = create_app(RuntimeConfig())
        app.state.service = SignatureService(SigningConfig(), entropy_source=failing_entropy)
        client = TestClient(app)

        response = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": RFC8032_SK})
        assert response.status_code == 200


def test_ecdsa_scalar_one_signs_for_generator():
    client = TestClient(create_app(RuntimeConfig(signing=SigningConfig(scheme="ecdsa-secp256k1"))))
    signature = client.post("/sign", json={"hash": GOLDEN_HASH, "sk": SCALAR_ONE}).json()["signature"]
    response = client.post(
        "/verify",
        json={"hash": GOLDEN_HASH, "signature": signature, "pk": GENERATORS["ecdsa-secp256k1"]},
    )
    assert response.json()["valid"] is True


# =============================================================================
# Concurrency
# =============================================================================

@pytest.mark.parametrize("path", ["/keygen", "/hash", "/sign", "/verify"])
def test_crypto_routes_run_in_threadpool(path):
    """Crypto handlers are sync so FastAPI dispatches them off the event loop."""
    app = create_app(RuntimeConfig())
    endpoints = [route.endpoint for route in app.routes if getattr(route, "path", None) == path]

    assert endpoints
    assert not any(inspect.iscoroutinefunction(endpoint) for endpoint in endpoints)


@pytest.mark.slow
def test_concurrent_requests():
    with TestClient(create_app(RuntimeConfig())) as client:
        def _round_trip(i: int) -> bool:
            digest = client.post("/hash", json={"msg": {"n": i}}).json()["hash"]
            signature = client.post("/sign", json={"hash": digest, "sk": RFC8032_SK}).json()["signature"]
            return client.post(
                "/verify", json={"hash": digest, "signature": signature, "pk": RFC8032_PK}
            ).json()["valid"]

        with ThreadPoolExecutor(max_workers=4) as pool:
            assert all(pool.map(_round_trip, range(16)))
