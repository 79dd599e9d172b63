"""Decode a finished token back into mappings for verbose display.

Decoding works from the token string alone, so the output doubles as a
check that what was encoded is what a consumer would read.
"""

import binascii
import json

from jwt.utils import base64url_decode
from pydantic import JsonValue

from jwtgen.core.errors import MalformedTokenError
from jwtgen.token.types import DecodedToken

SEGMENT_COUNT = 3
JSON_INDENT = 2


def split_token(token: str) -> list[str]:
    """Split a compact token into its three segments."""
    parts = token.split(".")
    if len(parts) != SEGMENT_COUNT:
        raise MalformedTokenError(
            f"expected {SEGMENT_COUNT} segments, got {len(parts)}"
        )
    return parts


def decode_segment(segment: str) -> dict[str, JsonValue]:
    """Base64url-decode a segment and parse it as a JSON object."""
    try:
        parsed = json.loads(base64url_decode(segment))
    except (binascii.Error, ValueError) as e:
        raise MalformedTokenError(str(e)) from e
    if not isinstance(parsed, dict):
        raise MalformedTokenError("segment is not a JSON object")
    return parsed


def decode(token: str) -> DecodedToken:
    """Recover the header and claim mappings from a compact token."""
    header_segment, payload_segment, _ = split_token(token)
    return DecodedToken(
        headers=decode_segment(header_segment),
        claims=decode_segment(payload_segment),
    )


def _pretty(data: dict[str, JsonValue]) -> str:
    """Indented JSON, the layout of the verbose report."""
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)


def render(decoded: DecodedToken, algorithm: str) -> str:
    """Human-readable block printed ahead of the token in verbose mode."""
    lines = [
        f"algorithm: {algorithm}",
        "",
        "claims:",
        _pretty(decoded.claims),
        "",
        "headers:",
        _pretty(decoded.headers),
        "",
        "token:",
    ]
    return "\n".join(lines)
