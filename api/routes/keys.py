"""
Module 09D - KeyGen Route

Generate a fresh key pair on the configured curve. Keys are returned to
the caller and never retained by the server.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_signature_service
from api.models.responses import KeygenResponse
from core.crypto.service import SignatureService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["keys"])


@router.post("/keygen", response_model=KeygenResponse)
def keygen(service: SignatureService = Depends(get_signature_service)) -> KeygenResponse:
    """
    Generate a key pair.

    Fails with 503 ENTROPY_FAILURE if no secure randomness is available.
    """
    keypair = service.generate_keypair()
    logger.info("Issued %s key pair", service.suite.name)
    logger.debug("Issued pk=%s", keypair.pk)
    return KeygenResponse(sk=keypair.sk, pk=keypair.pk)
