"""Generate a random encryption key (or nonce) for a host configuration.

Prints ``ENCRYPTION_KEY=<base64>`` by default so the line can be pasted into
an environment file. Keep the printed key secret; losing it means existing
ciphertext can no longer be decrypted.
"""

from __future__ import annotations

import argparse
import base64
import logging
from typing import Optional, Sequence

from chunkcrypt.security.adapter import AdapterConfig, CryptoAdapter

from .logging_config import configure_logging


logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a random chunkcrypt key or nonce."
    )
    parser.add_argument(
        "--nonce",
        action="store_true",
        help="Print a nonce instead of a key",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Print hex instead of base64",
    )
    parser.add_argument(
        "--name",
        default="ENCRYPTION_KEY",
        help="Variable name printed before the value (default: ENCRYPTION_KEY)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print only the encoded value, without NAME=",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def encode(value: bytes, use_hex: bool = False) -> str:
    if use_hex:
        return value.hex()
    return base64.b64encode(value).decode("ascii")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    adapter = CryptoAdapter(AdapterConfig.from_env())
    if args.nonce:
        value = adapter.generate_nonce()
        logger.debug("generated %d-byte nonce", len(value))
    else:
        value = adapter.generate_key()
        logger.debug("generated %d-byte key", len(value))

    encoded = encode(value, use_hex=args.hex)
    print(encoded if args.raw else f"{args.name}={encoded}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
