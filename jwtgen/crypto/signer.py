"""JWS signing for the HS256/HS384/HS512 and RS256 algorithms."""

import json
import logging
from collections.abc import Mapping

from jwt.algorithms import HMACAlgorithm, RSAAlgorithm
from jwt.utils import base64url_encode
from pydantic import JsonValue

from jwtgen.core.errors import (
    AlgorithmMismatchError,
    MissingPrivateKeyError,
    MissingSecretError,
)
from jwtgen.crypto.types import (
    Algorithm,
    PrivateKey,
    Secret,
    SigningMaterial,
    TokenSegments,
)

logger = logging.getLogger(__name__)

_HMAC_ALGORITHMS = {
    Algorithm.HS256: HMACAlgorithm(HMACAlgorithm.SHA256),
    Algorithm.HS384: HMACAlgorithm(HMACAlgorithm.SHA384),
    Algorithm.HS512: HMACAlgorithm(HMACAlgorithm.SHA512),
}
_RSA_SHA256 = RSAAlgorithm(RSAAlgorithm.SHA256)


def serialize(data: Mapping[str, JsonValue]) -> bytes:
    """Compact JSON in insertion order, UTF-8 encoded."""
    return json.dumps(
        data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def encode_segment(data: Mapping[str, JsonValue]) -> str:
    """Serialize a mapping and base64url-encode it without padding."""
    return base64url_encode(serialize(data)).decode("ascii")


def compute_signature(
    algorithm: Algorithm, material: SigningMaterial, signing_input: bytes
) -> bytes:
    """Raw signature bytes over ``header.payload``."""
    if algorithm.is_hmac:
        if not isinstance(material, Secret):
            raise MissingSecretError()
        return _HMAC_ALGORITHMS[algorithm].sign(signing_input, material.value)
    if not isinstance(material, PrivateKey):
        raise MissingPrivateKeyError()
    return _RSA_SHA256.sign(signing_input, material.key)


def sign(
    headers: Mapping[str, JsonValue],
    claims: Mapping[str, JsonValue],
    algorithm: Algorithm,
    material: SigningMaterial,
) -> TokenSegments:
    """Encode header and payload and sign them with the given algorithm."""
    if headers.get("alg") != algorithm.value:
        raise AlgorithmMismatchError(headers.get("alg"), algorithm.value)
    header_segment = encode_segment(headers)
    payload_segment = encode_segment(claims)
    signing_input = f"{header_segment}.{payload_segment}".encode("ascii")
    signature = compute_signature(algorithm, material, signing_input)
    logger.debug("signed %d claims with %s", len(claims), algorithm)
    return TokenSegments(
        header=header_segment,
        payload=payload_segment,
        signature=base64url_encode(signature).decode("ascii"),
    )
