"""
Runtime Configuration

Central configuration for the signing core and its adapters.

The signing configuration is an explicit immutable value: it is built once
at process start and handed to the SignatureService, so the curve and hash
choice are visible to every caller and test.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.schemas.errors import ConfigurationError

load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIGNET_"

DEFAULT_SCHEME = "ed25519"
DEFAULT_HASH_ALGORITHM = "sha256"

CONFIG_SEARCH_PATHS = (
    Path("signet.json"),
    Path(".signet.json"),
    Path("~/.config/signet/config.json"),
)


@dataclass(frozen=True)
class SigningConfig:
    """
    Curve/scheme and hash algorithm used by a running service.

    Names are normalized to lower case; they are resolved (and rejected if
    unknown) when a SignatureService is built from this value. A name that
    is not a string raises ConfigurationError here.
    """
    scheme: str = DEFAULT_SCHEME
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    def __post_init__(self):
        for name in ("scheme", "hash_algorithm"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"signing.{name} must be a string, got {type(value).__name__}",
                    details={"field": f"signing.{name}"},
                )
            object.__setattr__(self, name, value.strip().lower())


@dataclass
class ServerConfig:
    """Configuration for the HTTP adapter."""
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for Signet.

    Can be loaded from:
    - Environment variables
    - JSON file
    - Programmatic construction
    """
    signing: SigningConfig = field(default_factory=SigningConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SIGNET_SCHEME: signature scheme (ed25519, ecdsa-secp256k1, ecdsa-p256)
        - SIGNET_HASH_ALGORITHM: digest algorithm (sha256, sha3-256)
        - SIGNET_HOST / SIGNET_PORT: HTTP bind address
        - SIGNET_LOG_LEVEL / SIGNET_LOG_FILE: logging
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}SCHEME"):
            overrides.setdefault("signing", {})["scheme"] = os.getenv(f"{ENV_PREFIX}SCHEME")
        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("signing", {})["hash_algorithm"] = os.getenv(
                f"{ENV_PREFIX}HASH_ALGORITHM"
            )

        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides.setdefault("server", {})["host"] = os.getenv(f"{ENV_PREFIX}HOST")
        if os.getenv(f"{ENV_PREFIX}PORT"):
            overrides.setdefault("server", {})["port"] = int(os.getenv(f"{ENV_PREFIX}PORT", "8000"))

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        signing_data = data.get("signing", {})
        server_data = data.get("server", {})

        try:
            signing = SigningConfig(**signing_data) if signing_data else SigningConfig()
            server = ServerConfig(**server_data) if server_data else ServerConfig()
        except TypeError as e:
            raise ConfigurationError(
                f"Unknown or malformed configuration keys: {e}",
                details={"error": str(e)},
            ) from e

        return cls(
            signing=signing,
            server=server,
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "signing" in overrides:
            new_config.signing = SigningConfig(
                scheme=overrides["signing"].get("scheme", self.signing.scheme),
                hash_algorithm=overrides["signing"].get(
                    "hash_algorithm", self.signing.hash_algorithm
                ),
            )

        if "server" in overrides:
            for key, value in overrides["server"].items():
                setattr(new_config.server, key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]
        if "log_file" in overrides:
            new_config.log_file = overrides["log_file"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "signing": {
                "scheme": self.signing.scheme,
                "hash_algorithm": self.signing.hash_algorithm,
            },
            "server": {
                "host": self.server.host,
                "port": self.server.port,
            },
            "log_level": self.log_level,
            "log_file": self.log_file,
        }


def load_runtime_config(config_path: str | Path | None = None) -> RuntimeConfig:
    """
    Load RuntimeConfig from a config file, then overlay environment variables.

    Search order when no path is given:
      1. ./signet.json
      2. ./.signet.json
      3. ~/.config/signet/config.json

    Environment variables ALWAYS override config file values.
    """
    config: RuntimeConfig | None = None

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
        logger.info("Loaded config from %s", config_path)
    else:
        for candidate in CONFIG_SEARCH_PATHS:
            path = candidate.expanduser()
            if path.exists():
                config = RuntimeConfig.from_file(path)
                logger.info("Loaded config from %s", path)
                break

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"
