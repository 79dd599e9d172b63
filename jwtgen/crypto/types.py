"""Type definitions for algorithms, signing material, and token segments."""

from enum import StrEnum
from typing import Literal

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from pydantic import BaseModel, ConfigDict, Field


class Algorithm(StrEnum):
    """Supported JWS signing algorithms."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"

    @property
    def is_hmac(self) -> bool:
        """Whether the algorithm signs with a shared secret."""
        return self is not Algorithm.RS256


class Secret(BaseModel):
    """Shared secret for the HMAC algorithms."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["secret"] = "secret"
    value: bytes = Field(repr=False)


class PrivateKey(BaseModel):
    """Parsed RSA private key for RS256."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["private_key"] = "private_key"
    key: RSAPrivateKey = Field(repr=False)


SigningMaterial = Secret | PrivateKey


class TokenSegments(BaseModel):
    """The three base64url segments of a compact JWS."""

    model_config = ConfigDict(frozen=True)

    header: str
    payload: str
    signature: str
