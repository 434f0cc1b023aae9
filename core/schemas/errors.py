"""
Module 01 - Schemas & Canonicalization
File: errors.py

Purpose: Error taxonomy for the Signet signing core.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Taxonomy:
- INVALID_INPUT: malformed encoding (non-hex, wrong length, absent field)
- INVALID_KEY: hex decodes but is not a valid scalar / on-curve point
- ENTROPY_FAILURE: no secure randomness available (fatal, KeyGen only)

A well-formed signature that does not verify is NOT an error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the service."""

    # Input & Encoding Errors
    INVALID_INPUT = "INVALID_INPUT"
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Key Material Errors
    INVALID_KEY = "INVALID_KEY"

    # Fatal Errors
    ENTROPY_FAILURE = "ENTROPY_FAILURE"

    # Startup Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SignetError(BaseModel):
    """
    Base error model for structured error communication.

    Used by adapters (HTTP, CLI) to serialize a core failure without
    re-raising it.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    fatal: bool = Field(
        default=False,
        description="Whether the failure must halt the operation without fallback",
    )

    def to_exception(self) -> "SignetException":
        """Convert this error model to a raised exception."""
        return SignetException(
            code=self.code,
            message=self.message,
            details=self.details,
            fatal=self.fatal,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SignetException(Exception):
    """
    Base exception for all Signet errors.

    Carries structured error information and can be converted to a
    SignetError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "SIGNET_ERROR",
        details: dict[str, Any] | None = None,
        fatal: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.fatal = fatal

    def to_error_model(self) -> SignetError:
        """Convert this exception to a SignetError model."""
        return SignetError(
            code=self.code,
            message=self.message,
            details=self.details,
            fatal=self.fatal,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputError(SignetException):
    """Raised when an input is absent or its encoding is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field:
            full_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=full_details,
        )
        self.field = field


class InvalidKeyError(SignetException):
    """Raised when key material decodes but is not valid for the curve."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field:
            full_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_KEY,
            details=full_details,
        )
        self.field = field


class EntropyFailure(SignetException):
    """
    Raised when the secure random source is unavailable.

    Key generation halts; there is no fallback to a weaker source.
    """

    def __init__(
        self,
        message: str = "Secure random source unavailable",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ENTROPY_FAILURE,
            details=details,
            fatal=True,
        )


class CanonicalizationException(SignetException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
        )


class ConfigurationError(SignetException):
    """Raised at startup when the signing configuration names an unknown scheme or hash."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=details,
            fatal=True,
        )


__all__ = [
    "ErrorCodes",
    "SignetError",
    "SignetException",
    "InvalidInputError",
    "InvalidKeyError",
    "EntropyFailure",
    "CanonicalizationException",
    "ConfigurationError",
]
