"""API request and response models."""

from api.models.requests import HashRequest, SignRequest, VerifyRequest
from api.models.responses import (
    HealthResponse,
    SuiteResponse,
    KeygenResponse,
    HashResponse,
    SignResponse,
    VerifyResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "HashRequest",
    "SignRequest",
    "VerifyRequest",
    "HealthResponse",
    "SuiteResponse",
    "KeygenResponse",
    "HashResponse",
    "SignResponse",
    "VerifyResponse",
    "ErrorDetail",
    "ErrorResponse",
]
