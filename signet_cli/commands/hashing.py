"""
Module 09C - CLI Hash Command

Hash a payload given as text, as a JSON document, or as a file's bytes.

Usage:
    signet hash "hello world"
    signet hash --data '{"msg": "hello world"}'
    signet hash --file document.pdf
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from pathlib import Path
from typing import Any

from core.crypto.service import SignatureService
from core.schemas.errors import InvalidInputError
from signet_cli.exit_codes import EXIT_SUCCESS


logger = logging.getLogger(__name__)


def load_payload(args: Namespace) -> Any:
    """
    Resolve the payload from command-line arguments.

    Raises:
        InvalidInputError: If --data is not valid JSON or --file is unreadable
    """
    if args.data is not None:
        try:
            return json.loads(args.data)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"--data is not valid JSON: {e}", field="msg") from e

    if args.file is not None:
        path = Path(args.file)
        try:
            return path.read_bytes()
        except OSError as e:
            raise InvalidInputError(f"Cannot read {path}: {e}", field="msg") from e

    return args.text


def hash_cmd(args: Namespace) -> int:
    """Execute the hash command."""
    service: SignatureService = args.service
    digest = service.hash(load_payload(args))

    if args.json:
        print(json.dumps({"hash": digest, "hash_algorithm": service.hash_algorithm.name}, indent=2))
    else:
        print(digest)
    return EXIT_SUCCESS
