"""
Module 09C - CLI Key Commands

Generate a key pair, or derive the public key of an existing private key.
Keys are printed to stdout and never written anywhere by this tool.

Usage:
    signet keygen [--pem] [--json]
    signet pubkey --sk <hex> [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from dataclasses import dataclass, asdict
from typing import Any

from core.crypto.service import SignatureService
from core.crypto.suites import export_private_pem, export_public_pem
from core.crypto.types import KeyPair
from signet_cli.exit_codes import EXIT_SUCCESS


logger = logging.getLogger(__name__)


@dataclass
class KeySummary:
    """Key pair for CLI output."""
    scheme: str = ""
    sk: str | None = None
    pk: str = ""
    sk_pem: str | None = None
    pk_pem: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


def build_summary(
    service: SignatureService,
    keypair: KeyPair,
    include_sk: bool = True,
    pem: bool = False,
) -> KeySummary:
    summary = KeySummary(scheme=service.suite.name, pk=keypair.pk)
    if include_sk:
        summary.sk = keypair.sk
    if pem:
        summary.pk_pem = export_public_pem(keypair.public_key)
        if include_sk:
            summary.sk_pem = export_private_pem(keypair.private_key)
    return summary


def print_summary_human(summary: KeySummary) -> None:
    """Print summary in human-readable format."""
    print(f"scheme: {summary.scheme}")
    if summary.sk is not None:
        print(f"sk: {summary.sk}")
    print(f"pk: {summary.pk}")
    if summary.sk_pem:
        print()
        print(summary.sk_pem, end="")
    if summary.pk_pem:
        print()
        print(summary.pk_pem, end="")


def _emit(args: Namespace, summary: KeySummary) -> int:
    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)
    return EXIT_SUCCESS


def keygen_cmd(args: Namespace) -> int:
    """Execute the keygen command."""
    service: SignatureService = args.service
    keypair = service.generate_keypair()
    logger.info("Generated %s key pair", service.suite.name)
    return _emit(args, build_summary(service, keypair, pem=args.pem))


def pubkey_cmd(args: Namespace) -> int:
    """Execute the pubkey command."""
    service: SignatureService = args.service
    keypair = service.derive_keypair(args.sk)
    return _emit(args, build_summary(service, keypair, include_sk=False, pem=args.pem))
