"""
Module 09D - API Request Models

Pydantic models for API request validation.

Fields arrive as opaque strings here; the core parses and validates the
hex encodings itself, so these models only check presence and type.
"""

from typing import Any

from pydantic import BaseModel, Field


class HashRequest(BaseModel):
    """Request body for POST /hash endpoint."""

    msg: Any = Field(
        ...,
        description="Payload to hash: text is hashed as UTF-8, anything else as canonical JSON",
    )


class SignRequest(BaseModel):
    """Request body for POST /sign endpoint."""

    hash: str = Field(..., description="Hex digest to sign (32 bytes)")
    sk: str = Field(..., description="Hex private key")


class VerifyRequest(BaseModel):
    """Request body for POST /verify endpoint."""

    hash: str = Field(..., description="Hex digest that was signed (32 bytes)")
    signature: str = Field(..., description="Hex signature")
    pk: str = Field(..., description="Hex public key")
