"""API route handlers."""

from api.routes import health, keys, hashing, signatures

__all__ = ["health", "keys", "hashing", "signatures"]
