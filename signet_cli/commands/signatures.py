"""
Module 09C - CLI Sign / Verify Commands

Usage:
    signet sign --hash <hex> --sk <hex> [--json]
    signet verify --hash <hex> --signature <hex> --pk <hex> [--json]

verify exits 0 when the signature is valid and 2 when it is well-formed
but does not verify. Malformed inputs exit 1.
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from core.crypto.service import SignatureService
from signet_cli.exit_codes import EXIT_SUCCESS, EXIT_VERIFICATION_FAILED


logger = logging.getLogger(__name__)


def sign_cmd(args: Namespace) -> int:
    """Execute the sign command."""
    service: SignatureService = args.service
    signature = service.sign(args.hash, args.sk)

    if args.json:
        print(json.dumps({"signature": signature, "scheme": service.suite.name}, indent=2))
    else:
        print(signature)
    return EXIT_SUCCESS


def verify_cmd(args: Namespace) -> int:
    """Execute the verify command."""
    service: SignatureService = args.service
    valid = service.verify(args.hash, args.signature, args.pk)

    if args.json:
        print(json.dumps({"valid": valid, "scheme": service.suite.name}, indent=2))
    else:
        print(f"valid: {str(valid).lower()}")

    if not valid:
        logger.info("Signature did not verify")
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
