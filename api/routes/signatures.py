"""
Module 09D - Sign / Verify Routes

Sign a digest with a private key, and verify a signature against a
public key. Malformed inputs are 400s; a well-formed signature that does
not verify is a 200 with valid=false.

Handlers are plain functions: FastAPI runs them in its threadpool, so
curve arithmetic never blocks the event loop.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_signature_service
from api.models.requests import SignRequest, VerifyRequest
from api.models.responses import SignResponse, VerifyResponse
from core.crypto.service import SignatureService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["signatures"])


@router.post("/sign", response_model=SignResponse)
def sign(
    request: SignRequest,
    service: SignatureService = Depends(get_signature_service),
) -> SignResponse:
    """Sign a hex digest with a hex private key."""
    return SignResponse(signature=service.sign(request.hash, request.sk))


@router.post("/verify", response_model=VerifyResponse)
def verify(
    request: VerifyRequest,
    service: SignatureService = Depends(get_signature_service),
) -> VerifyResponse:
    """Verify a hex signature over a hex digest against a hex public key."""
    valid = service.verify(request.hash, request.signature, request.pk)
    if not valid:
        logger.info("Signature did not verify")
        logger.debug("Rejected signature for pk=%s", request.pk)
    return VerifyResponse(valid=valid)
