"""Compact serialization of signed token segments."""

from jwtgen.crypto.types import TokenSegments


def assemble(segments: TokenSegments) -> str:
    """Join the segments as ``header.payload.signature``."""
    return ".".join((segments.header, segments.payload, segments.signature))
