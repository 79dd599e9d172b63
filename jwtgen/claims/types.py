"""Type definitions for token requests and claim/header mappings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, JsonValue

from jwtgen.crypto.types import Algorithm

ClaimSet = dict[str, JsonValue]
HeaderSet = dict[str, JsonValue]
EntryKind = Literal["claim", "header"]


class TokenRequest(BaseModel):
    """Everything needed to build one token, validated at the CLI boundary."""

    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm
    secret: str = Field(default="", repr=False)
    private_key_path: str = ""
    claim_entries: tuple[str, ...] = ()
    claims_json: str | None = None
    header_entries: tuple[str, ...] = ()
    headers_json: str | None = None
    iat: FiniteFloat | None = None
    exp: FiniteFloat | None = None
    verbose: bool = False
