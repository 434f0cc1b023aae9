"""
Module 09D - FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from api.deps import build_service
from api.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    signet_error_handler,
    validation_error_handler,
)
from api.routes import health, keys, hashing, signatures
from core.config.runtime import RuntimeConfig, load_runtime_config
from core.schemas.errors import SignetException


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the API process."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def create_app(config: RuntimeConfig | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Runtime configuration; loaded from signet.json / SIGNET_*
                environment variables when None
    """
    config = config or load_runtime_config()

    app = FastAPI(
        title="Signet API",
        description="""
HTTP API for the Signet digital-signature service.

## Endpoints

- **POST /keygen** - Generate a key pair on the configured curve
- **POST /hash** - Hash a payload (`msg`)
- **POST /sign** - Sign a digest (`hash`, `sk`)
- **POST /verify** - Verify a signature (`hash`, `signature`, `pk`)
- **GET /suite** - Configured scheme, curve, hash and encodings
- **GET /health** - Health check

All keys, digests and signatures are hex strings. Malformed inputs return
400; a well-formed signature that does not verify returns `valid: false`.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.config = config
    app.state.service = build_service(config)

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(SignetException, signet_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(keys.router)
    app.include_router(hashing.router)
    app.include_router(signatures.router)

    return app


_runtime_config = load_runtime_config()
setup_logging(_runtime_config.log_level, _runtime_config.log_file)

# Create the application instance
app = create_app(_runtime_config)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=_runtime_config.server.host, port=_runtime_config.server.port)
