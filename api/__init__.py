"""
Module 09D - Minimal API (FastAPI)

HTTP adapter for the Signet signing core:
- POST /keygen - Generate a key pair
- POST /hash - Hash a payload
- POST /sign - Sign a digest
- POST /verify - Verify a signature
- GET /suite - Configured scheme and encodings
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
