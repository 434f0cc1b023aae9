"""
Pytest configuration and shared fixtures for Signet tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from core.config.runtime import SigningConfig
from core.crypto.service import SignatureService

from fixtures.vectors import SCHEMES


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def signing_config():
    """Provide the default SigningConfig (ed25519 / sha256)."""
    return SigningConfig()


@pytest.fixture
def service(signing_config):
    """Provide a SignatureService for the default configuration."""
    return SignatureService(signing_config)


@pytest.fixture(params=SCHEMES)
def any_service(request):
    """Provide a SignatureService for each supported scheme."""
    return SignatureService(SigningConfig(scheme=request.param))


@pytest.fixture
def keypair(any_service):
    """Provide a fresh key pair for the parametrized scheme."""
    return any_service.generate_keypair()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no SIGNET_* variables and an empty working directory."""
    for name in [
        "SIGNET_SCHEME",
        "SIGNET_HASH_ALGORITHM",
        "SIGNET_HOST",
        "SIGNET_PORT",
        "SIGNET_LOG_LEVEL",
        "SIGNET_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


# =============================================================================
# Test Helpers (available to all tests via fixtures)
# =============================================================================

@pytest.fixture
def failing_entropy():
    """An entropy source that behaves like an unavailable OS CSPRNG."""
    def _source(n: int) -> bytes:
        raise OSError("getrandom unavailable")
    return _source


@pytest.fixture
def flip_byte():
    """Helper to XOR one byte of a hex string with 0x01."""
    def _flip(hex_string: str, index: int) -> str:
        raw = bytearray(bytes.fromhex(hex_string))
        raw[index] ^= 0x01
        return raw.hex()
    return _flip
