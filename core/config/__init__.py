"""
Runtime Configuration Module

Provides configuration loading and management for Signet.
"""

from .runtime import (
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_SCHEME,
    RuntimeConfig,
    ServerConfig,
    SigningConfig,
    get_default_config_template,
    load_runtime_config,
)

__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "DEFAULT_SCHEME",
    "RuntimeConfig",
    "ServerConfig",
    "SigningConfig",
    "get_default_config_template",
    "load_runtime_config",
]
