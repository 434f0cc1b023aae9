"""
Module 09D - Health Check Route

Health check endpoint for liveness checks, and discovery of the
configured signing suite.
"""

from fastapi import APIRouter, Depends

from api.deps import get_signature_service
from api.models.responses import HealthResponse, SuiteResponse
from core.crypto.service import SignatureService


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns service status for liveness checks.
    """
    return HealthResponse(
        ok=True,
        service="signet-api",
        version="v1",
    )


@router.get("/", response_model=HealthResponse)
async def root() -> HealthResponse:
    """
    Root endpoint - same as health check.
    """
    return await health_check()


@router.get("/suite", response_model=SuiteResponse)
async def suite(service: SignatureService = Depends(get_signature_service)) -> SuiteResponse:
    """Scheme, curve, hash algorithm and encodings this server uses."""
    return SuiteResponse(ok=True, **service.describe())
