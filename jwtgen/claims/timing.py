"""Issued-at and expiry resolution."""

import math


def resolve_iat(iat: float | None, now: float) -> int:
    """Resolve ``iat`` in whole epoch seconds.

    ``None`` means now, a negative value is an offset back from now, and
    anything else is taken as an absolute timestamp.
    """
    if iat is None:
        return math.floor(now)
    if iat < 0:
        return math.floor(now + iat)
    return math.floor(iat)


def resolve_exp(iat: int, offset: float | None) -> int | None:
    """Expiry as ``iat`` plus a whole-second offset; no offset, no expiry."""
    if offset is None:
        return None
    return iat + math.floor(offset)
