"""Diagnostic logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout carries only the token."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
