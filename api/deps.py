"""
Module 09D - API Dependencies

Dependency injection for the API.

The SignatureService is built once in create_app() and stored on
app.state; handlers receive it through get_signature_service().
"""

from __future__ import annotations

import logging

from fastapi import Request

from core.config.runtime import RuntimeConfig, load_runtime_config
from core.crypto.service import SignatureService

logger = logging.getLogger(__name__)


def build_service(config: RuntimeConfig | None = None) -> SignatureService:
    """
    Create the process-wide SignatureService.

    Args:
        config: Runtime configuration; loaded from file/env when None

    Raises:
        ConfigurationError: If the configured scheme or hash is unknown
    """
    config = config or load_runtime_config()
    return SignatureService(config.signing)


def get_signature_service(request: Request) -> SignatureService:
    """FastAPI dependency returning the app's SignatureService."""
    return request.app.state.service
