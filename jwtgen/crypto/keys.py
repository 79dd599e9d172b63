"""Signing material resolution and RSA private key loading."""

import logging
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from jwtgen.core.errors import (
    InvalidPrivateKeyError,
    InvalidSecretError,
    MissingPrivateKeyError,
    MissingSecretError,
)
from jwtgen.crypto.types import Algorithm, PrivateKey, Secret, SigningMaterial

logger = logging.getLogger(__name__)


def load_private_key(path: str) -> RSAPrivateKey:
    """Read a PEM file once and parse it as an unencrypted RSA private key."""
    try:
        pem = Path(path).read_bytes()
    except OSError as e:
        logger.debug("cannot read private key file %s: %s", path, e)
        raise MissingPrivateKeyError() from e
    try:
        loaded = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise InvalidPrivateKeyError(path) from e
    if not isinstance(loaded, RSAPrivateKey):
        raise InvalidPrivateKeyError(path)
    logger.debug("loaded %d-bit RSA private key from %s", loaded.key_size, path)
    return loaded


def resolve_signing_material(
    algorithm: Algorithm, secret: str, private_key_path: str
) -> SigningMaterial:
    """Pick the secret or the private key, whichever the algorithm needs."""
    if algorithm.is_hmac:
        if not secret:
            raise MissingSecretError()
        try:
            value = secret.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidSecretError() from e
        return Secret(value=value)
    if not private_key_path:
        raise MissingPrivateKeyError()
    return PrivateKey(key=load_private_key(private_key_path))
