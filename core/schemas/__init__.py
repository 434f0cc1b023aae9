"""
Module 01 - Schemas & Canonicalization
File: __init__.py

Purpose: Export the error taxonomy and canonical serialization API.
"""

from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_bytes,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
)

from .errors import (
    CanonicalizationException,
    ConfigurationError,
    EntropyFailure,
    ErrorCodes,
    InvalidInputError,
    InvalidKeyError,
    SignetError,
    SignetException,
)

__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonical_bytes",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "ensure_utc",
    "format_datetime_canonical",
    # Errors
    "CanonicalizationException",
    "ConfigurationError",
    "EntropyFailure",
    "ErrorCodes",
    "InvalidInputError",
    "InvalidKeyError",
    "SignetError",
    "SignetException",
]
