"""
Module 09D - Hash Route

Digest an arbitrary JSON payload.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.deps import get_signature_service
from api.models.requests import HashRequest
from api.models.responses import HashResponse
from core.crypto.service import SignatureService


router = APIRouter(tags=["hashing"])


@router.post("/hash", response_model=HashResponse)
def hash_message(
    request: HashRequest,
    service: SignatureService = Depends(get_signature_service),
) -> HashResponse:
    """
    Hash the `msg` payload.

    Strings are hashed as UTF-8 text; objects, arrays, numbers and
    booleans as canonical JSON (sorted keys, no whitespace).
    """
    return HashResponse(hash=service.hash(request.msg))
