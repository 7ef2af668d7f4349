"""Lightweight logging setup for the command line tools."""

import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    # Configure root logger once; keep output simple for terminals.
    # Goes to stderr so key material printed on stdout can be piped cleanly.
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
