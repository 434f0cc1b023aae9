"""
Module 09D - API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "signet-api"
    version: str = "v1"


class SuiteResponse(BaseModel):
    """Response for GET /suite endpoint."""

    ok: bool = True
    scheme: str = Field(..., description="Configured signature scheme")
    curve: str = Field(..., description="Curve the scheme operates on")
    hash_algorithm: str = Field(..., description="Digest algorithm used by /hash")
    digest_size: int = Field(..., description="Digest length in bytes")
    private_key_encoding: str
    public_key_encoding: str
    signature_encoding: str
    public_key_encodings_accepted: list[str] = Field(default_factory=list)


class KeygenResponse(BaseModel):
    """Response for POST /keygen endpoint."""

    ok: bool = True
    sk: str = Field(..., description="Hex private key")
    pk: str = Field(..., description="Hex public key")


class HashResponse(BaseModel):
    """Response for POST /hash endpoint."""

    ok: bool = True
    hash: str = Field(..., description="Hex digest")


class SignResponse(BaseModel):
    """Response for POST /sign endpoint."""

    ok: bool = True
    signature: str = Field(..., description="Hex signature")


class VerifyResponse(BaseModel):
    """Response for POST /verify endpoint."""

    ok: bool = True
    valid: bool = Field(..., description="Whether the signature verifies")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")
