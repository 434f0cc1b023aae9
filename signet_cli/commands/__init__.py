"""
CLI command modules.
"""

from signet_cli.commands import keys, hashing, signatures

__all__ = ["keys", "hashing", "signatures"]
