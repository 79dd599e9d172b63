"""Type definitions for decoded tokens."""

from pydantic import BaseModel, ConfigDict, JsonValue


class DecodedToken(BaseModel):
    """Header and claims recovered from a compact token, unverified."""

    model_config = ConfigDict(frozen=True)

    headers: dict[str, JsonValue]
    claims: dict[str, JsonValue]
