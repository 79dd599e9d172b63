"""Build claim and header sets from defaults plus user overrides."""

import json
import logging
import math
import time
from collections.abc import Iterable

from pydantic import JsonValue

from jwtgen.claims.timing import resolve_exp, resolve_iat
from jwtgen.claims.types import ClaimSet, EntryKind, HeaderSet, TokenRequest
from jwtgen.core.errors import AlgorithmMismatchError, InvalidEntryError

logger = logging.getLogger(__name__)

DEFAULT_TYP = "JWT"


def _reject_constant(name: str) -> JsonValue:
    # NaN and Infinity are not valid JSON and would not serialize back
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    # literals such as 1e999 overflow to infinity
    if not math.isfinite(value):
        raise ValueError(f"out of range number: {text}")
    return value


def _loads(raw: str) -> JsonValue:
    return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)


def _ensure_encodable(value: JsonValue, kind: str, raw: str) -> None:
    """Reject text that cannot be written as UTF-8, such as lone surrogates."""
    try:
        json.dumps(value, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEntryError(kind, raw) from e


def parse_value(raw: str) -> JsonValue:
    """Parse a value as JSON, falling back to the string itself."""
    try:
        return _loads(raw)
    except ValueError:
        return raw


def parse_entry(raw: str, kind: EntryKind) -> tuple[str, JsonValue]:
    """Split one ``key=value`` override into a trimmed key and typed value."""
    parts = raw.split("=")
    if len(parts) != 2:
        raise InvalidEntryError(kind, raw)
    key, value = parts[0].strip(), parts[1].strip()
    if not key:
        raise InvalidEntryError(kind, raw)
    parsed = parse_value(value)
    _ensure_encodable({key: parsed}, kind, raw)
    return key, parsed


def parse_entries(entries: Iterable[str], kind: EntryKind) -> dict[str, JsonValue]:
    """Parse every override; the first bad one aborts the whole set."""
    parsed: dict[str, JsonValue] = {}
    for raw in entries:
        key, value = parse_entry(raw, kind)
        parsed[key] = value
    return parsed


def parse_object(raw: str, kind: EntryKind) -> dict[str, JsonValue]:
    """Parse a raw JSON object given as the complete override set."""
    try:
        parsed = _loads(raw)
    except ValueError as e:
        raise InvalidEntryError(f"{kind}s", raw) from e
    if not isinstance(parsed, dict):
        raise InvalidEntryError(f"{kind}s", raw)
    _ensure_encodable(parsed, f"{kind}s", raw)
    return parsed


def user_overrides(
    entries: Iterable[str], raw_json: str | None, kind: EntryKind
) -> dict[str, JsonValue]:
    """A raw JSON object replaces the ``key=value`` list entirely."""
    if raw_json:
        return parse_object(raw_json, kind)
    return parse_entries(entries, kind)


def build_claims(request: TokenRequest, now: float | None = None) -> ClaimSet:
    """Default ``iat``/``exp`` claims overlaid with the user's claims."""
    if now is None:
        now = time.time()
    iat = resolve_iat(request.iat, now)
    claims: ClaimSet = {"iat": iat}
    exp = resolve_exp(iat, request.exp)
    if exp is not None:
        claims["exp"] = exp
    overrides = user_overrides(request.claim_entries, request.claims_json, "claim")
    claims.update(overrides)
    logger.debug("claims: defaults iat/exp plus %s", sorted(overrides))
    return claims


def build_headers(request: TokenRequest) -> HeaderSet:
    """Default ``typ``/``alg`` headers overlaid with the user's headers."""
    headers: HeaderSet = {"typ": DEFAULT_TYP, "alg": request.algorithm.value}
    overrides = user_overrides(
        request.header_entries, request.headers_json, "header"
    )
    if "alg" in overrides and overrides["alg"] != request.algorithm.value:
        raise AlgorithmMismatchError(overrides["alg"], request.algorithm.value)
    headers.update(overrides)
    logger.debug("headers: defaults typ/alg plus %s", sorted(overrides))
    return headers
