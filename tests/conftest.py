"""Shared test fixtures for jwtgen."""

from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

# 64 bytes satisfies the minimum HMAC key length for HS512 as well
SECRET = "s3cr3t-" * 9 + "x"
FIXED_NOW = 1_700_000_000.75


@pytest.fixture
def secret() -> str:
    return SECRET


@pytest.fixture
def fixed_now() -> float:
    """A clock reading with a fractional part, to exercise flooring."""
    return FIXED_NOW


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep JWTGEN_* variables from the outer shell out of tests."""
    for name in ("JWTGEN_SECRET", "JWTGEN_PRIVATE_KEY", "JWTGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """One RSA-2048 key for the whole session; generation is slow."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(rsa_key: RSAPrivateKey) -> str:
    return (
        rsa_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture
def private_key_file(tmp_path: Path, rsa_key: RSAPrivateKey) -> Path:
    """Unencrypted PKCS8 PEM file holding the session RSA key."""
    path = tmp_path / "private.pem"
    path.write_bytes(
        rsa_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return path


@pytest.fixture
def ec_key_file(tmp_path: Path) -> Path:
    """A valid PEM private key that is not RSA."""
    path = tmp_path / "ec.pem"
    key = ec.generate_private_key(ec.SECP256R1())
    path.write_bytes(
        key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return path


@pytest.fixture
def encrypted_key_file(tmp_path: Path, rsa_key: RSAPrivateKey) -> Path:
    """RSA key protected by a passphrase, unusable without one."""
    path = tmp_path / "encrypted.pem"
    path.write_bytes(
        rsa_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.BestAvailableEncryption(b"pass"),
        )
    )
    return path
