"""
Module 01 - Schemas & Canonicalization
File: canonical.py

Purpose: Turn a structured payload into the one byte string the Hasher
digests. Two payloads that are equal as JSON documents serialize to the
same bytes, whatever their key order or the Python types that carried them.

Canonical form:
    - JSON object keys sorted, separators "," and ":" with no whitespace
    - UTF-8 output, non-ASCII characters kept literal
    - keys whose value is None are omitted
    - datetimes as UTC ISO-8601 with a "Z" suffix
    - enums as their values, bytes as lowercase hex
    - pydantic models as their JSON-mode dump
    - NaN and +/-Infinity are rejected
"""

import json
import math
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException

CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")

_JSON_SCALARS = (str, int, bool)


def ensure_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_datetime_canonical(dt: datetime) -> str:
    """
    ISO-8601 in UTC with a Z suffix; microseconds only when non-zero.

    Example:
        >>> format_datetime_canonical(datetime(2026, 1, 27, 21, 35))
        '2026-01-27T21:35:00Z'
    """
    pattern = "%Y-%m-%dT%H:%M:%S.%fZ" if dt.microsecond else "%Y-%m-%dT%H:%M:%SZ"
    return ensure_utc(dt).strftime(pattern)


def _child(path: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else str(key)


def _canonical_mapping(value: Mapping, path: str) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise CanonicalizationException(
                message=f"Object keys must be strings, got {type(key).__name__}",
                details={"path": path, "key": repr(key)},
            )
        if item is not None:
            result[key] = canonicalize_value(item, _child(path, key))
    return result


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Reduce a value to plain JSON types in canonical form.

    Args:
        value: The payload (or a nested part of it)
        path: Location inside the payload, reported on failure

    Raises:
        CanonicalizationException: For non-finite floats, non-string object
            keys, and types with no JSON representation
    """
    if isinstance(value, Enum):
        return canonicalize_value(value.value, path)

    if value is None or isinstance(value, _JSON_SCALARS):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise CanonicalizationException(
                message=f"Non-finite number has no JSON form: {value}",
                details={"path": path, "value": str(value)},
            )
        return value

    if isinstance(value, datetime):
        return format_datetime_canonical(value)

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()

    if isinstance(value, BaseModel):
        return canonicalize_value(value.model_dump(mode="json", by_alias=True), path)

    if isinstance(value, Mapping):
        return _canonical_mapping(value, path)

    if isinstance(value, (list, tuple)):
        return [canonicalize_value(item, _child(path, i)) for i, item in enumerate(value)]

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Canonical JSON text of ``obj``.

    Example:
        >>> dumps_canonical({"msg": "hello world"})
        '{"msg":"hello world"}'
    """
    try:
        return json.dumps(
            canonicalize_value(obj),
            sort_keys=True,
            separators=CANONICAL_JSON_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e


def canonical_bytes(obj: Any) -> bytes:
    """UTF-8 encoded canonical JSON of ``obj``; these are the bytes that get hashed."""
    return dumps_canonical(obj).encode("utf-8")


def canonical_equals(obj1: Any, obj2: Any) -> bool:
    """True if both objects have the same canonical JSON; False if either has none."""
    try:
        return canonical_bytes(obj1) == canonical_bytes(obj2)
    except CanonicalizationException:
        return False
