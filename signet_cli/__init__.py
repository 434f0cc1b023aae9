"""
Module 09C - Signet CLI

Command-line interface for the Signet signing core.

Usage:
    python -m signet_cli keygen
    python -m signet_cli hash "hello world"
    python -m signet_cli sign --hash <hex> --sk <hex>
    python -m signet_cli verify --hash <hex> --signature <hex> --pk <hex>
    python -m signet_cli suite
"""

__version__ = "0.1.0"
