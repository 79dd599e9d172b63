"""Tests for the error hierarchy and its messages."""

import pytest

from jwtgen.core.errors import (
    AlgorithmMismatchError,
    InvalidEntryError,
    InvalidPrivateKeyError,
    InvalidSecretError,
    JwtGenError,
    MalformedTokenError,
    MissingPrivateKeyError,
    MissingSecretError,
    MissingSigningMaterialError,
)


class TestMessages:
    """User-facing messages are fixed strings."""

    def test_missing_secret(self) -> None:
        assert str(MissingSecretError()) == "secret value missing"

    def test_missing_private_key(self) -> None:
        assert str(MissingPrivateKeyError()) == "private key missing"

    def test_invalid_entry(self) -> None:
        assert InvalidEntryError("claim", "x").detail == "invalid claim: x"

    def test_invalid_entry_escapes_surrogates(self) -> None:
        error = InvalidEntryError("header", "kid=\udc80")
        assert error.detail == "invalid header: kid=\\udc80"
        assert error.raw == "kid=\udc80"

    def test_invalid_secret_hides_value(self) -> None:
        assert str(InvalidSecretError()) == "invalid secret: not valid UTF-8"

    def test_invalid_private_key(self) -> None:
        assert str(InvalidPrivateKeyError("/k.pem")) == "invalid private key: /k.pem"

    def test_mismatch_names_both(self) -> None:
        message = str(AlgorithmMismatchError("RS256", "HS256"))
        assert "RS256" in message
        assert "HS256" in message


class TestHierarchy:
    """Every failure is a JwtGenError exiting with status 1."""

    @pytest.mark.parametrize(
        "error",
        [
            MissingSecretError(),
            MissingPrivateKeyError(),
            InvalidEntryError("header", "h"),
            AlgorithmMismatchError("a", "b"),
            InvalidPrivateKeyError("p"),
            InvalidSecretError(),
            MalformedTokenError("r"),
        ],
    )
    def test_base_class_and_exit_code(self, error: JwtGenError) -> None:
        assert isinstance(error, JwtGenError)
        assert error.exit_code == 1

    def test_material_errors_share_parent(self) -> None:
        assert issubclass(MissingSecretError, MissingSigningMaterialError)
        assert issubclass(MissingPrivateKeyError, MissingSigningMaterialError)
