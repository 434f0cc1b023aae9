"""
Module 09C - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m signet_cli keygen [--pem] [--json]
    python -m signet_cli pubkey --sk <hex> [--json]
    python -m signet_cli hash (<text> | --data <json> | --file <path>) [--json]
    python -m signet_cli sign --hash <hex> --sk <hex> [--json]
    python -m signet_cli verify --hash <hex> --signature <hex> --pk <hex> [--json]
    python -m signet_cli suite [--json]
    python -m signet_cli config --init | --show

Environment Variables:
    SIGNET_SCHEME               Signature scheme (ed25519, ecdsa-secp256k1, ecdsa-p256)
    SIGNET_HASH_ALGORITHM       Digest algorithm (sha256, sha3-256)
    SIGNET_LOG_LEVEL            Log level (default: INFO)
    SIGNET_LOG_FILE             Also log to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from core.config.runtime import (
    RuntimeConfig,
    get_default_config_template,
    load_runtime_config,
)
from core.crypto.service import SignatureService
from core.schemas.errors import SignetException
from signet_cli.commands import hashing, keys, signatures
from signet_cli.exit_codes import EXIT_RUNTIME_ERROR, EXIT_SUCCESS

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="signet",
        description="Signet CLI - Generate keys, hash payloads, sign digests and verify signatures.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./signet.json or ~/.config/signet/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--scheme",
        type=str,
        default=None,
        help="Signature scheme (overrides config)",
    )
    parser.add_argument(
        "--hash-algorithm",
        type=str,
        default=None,
        help="Digest algorithm (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- keygen command ---
    keygen_parser = subparsers.add_parser(
        "keygen",
        help="Generate a key pair",
        description="Generate a fresh key pair on the configured curve and print it.",
    )
    keygen_parser.add_argument(
        "--pem",
        action="store_true",
        default=False,
        help="Also print PKCS#8 / SubjectPublicKeyInfo PEM encodings",
    )
    _add_json_flag(keygen_parser)
    keygen_parser.set_defaults(func=keys.keygen_cmd)

    # --- pubkey command ---
    pubkey_parser = subparsers.add_parser(
        "pubkey",
        help="Derive the public key of a private key",
    )
    pubkey_parser.add_argument("--sk", type=str, required=True, help="Hex private key")
    pubkey_parser.add_argument(
        "--pem",
        action="store_true",
        default=False,
        help="Also print the SubjectPublicKeyInfo PEM encoding",
    )
    _add_json_flag(pubkey_parser)
    pubkey_parser.set_defaults(func=keys.pubkey_cmd)

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Hash a payload",
        description="Hash text (UTF-8), a JSON document (canonical JSON), or a file's bytes.",
    )
    source = hash_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", type=str, nargs="?", default=None, help="Text to hash")
    source.add_argument("--data", type=str, default=None, help="JSON document to hash")
    source.add_argument("--file", type=str, default=None, help="File whose bytes to hash")
    _add_json_flag(hash_parser)
    hash_parser.set_defaults(func=hashing.hash_cmd)

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a digest",
    )
    sign_parser.add_argument("--hash", type=str, required=True, help="Hex digest")
    sign_parser.add_argument("--sk", type=str, required=True, help="Hex private key")
    _add_json_flag(sign_parser)
    sign_parser.set_defaults(func=signatures.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a signature",
        description="Exit 0 if the signature is valid, 2 if it does not verify.",
    )
    verify_parser.add_argument("--hash", type=str, required=True, help="Hex digest")
    verify_parser.add_argument("--signature", type=str, required=True, help="Hex signature")
    verify_parser.add_argument("--pk", type=str, required=True, help="Hex public key")
    _add_json_flag(verify_parser)
    verify_parser.set_defaults(func=signatures.verify_cmd)

    # --- suite command ---
    suite_parser = subparsers.add_parser(
        "suite",
        help="Show the configured scheme, curve and encodings",
    )
    _add_json_flag(suite_parser)
    suite_parser.set_defaults(func=suite_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="signet.json",
        help="Path for config file (default: signet.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (SIGNET_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: signet config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def suite_cmd(args: argparse.Namespace) -> int:
    """Handle suite command."""
    info = args.service.describe()
    if args.json:
        print(json.dumps(info, indent=2))
    else:
        for key, value in info.items():
            if isinstance(value, list):
                value = ", ".join(value)
            print(f"{key}: {value}")
    return EXIT_SUCCESS


def resolve_config(args: argparse.Namespace) -> RuntimeConfig:
    """Load file/env configuration and apply command-line overrides."""
    config = load_runtime_config(args.config)

    signing = config.signing
    if args.scheme:
        signing = replace(signing, scheme=args.scheme)
    if args.hash_algorithm:
        signing = replace(signing, hash_algorithm=args.hash_algorithm)
    config.signing = signing

    if args.log_level:
        config.log_level = args.log_level
    return config


def report_error(args: argparse.Namespace, exc: SignetException) -> None:
    """Print a core error to stderr (as JSON when --json was given)."""
    if getattr(args, "json", False):
        print(json.dumps(exc.to_error_model().model_dump(), indent=2), file=sys.stderr)
    else:
        print(f"Error [{exc.code}]: {exc.message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=signature did not verify)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = resolve_config(args)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=config.log_level, log_file=config.log_file)
    args.runtime_config = config

    try:
        if args.command != "config":
            args.service = SignatureService(config.signing)
        return args.func(args)
    except SignetException as e:
        if e.fatal:
            logger.critical("%s: %s", e.code, e.message)
        if args.debug:
            traceback.print_exc()
        report_error(args, e)
        return EXIT_RUNTIME_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
