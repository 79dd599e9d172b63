"""Exception hierarchy for token generation failures.

Every failure is a user-input error: deterministic for the same arguments
and never retried. Library code raises these; only the CLI catches them.
"""


class JwtGenError(Exception):
    """Base class for all jwtgen failures."""

    exit_code = 1

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


def _printable(text: str) -> str:
    # lone surrogates from undecodable argv bytes cannot be written to stderr
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class InvalidEntryError(JwtGenError):
    """A claim or header override could not be parsed."""

    def __init__(self, kind: str, raw: str) -> None:
        self.kind = kind
        self.raw = raw
        super().__init__(f"invalid {kind}: {_printable(raw)}")


class AlgorithmMismatchError(JwtGenError):
    """The ``alg`` header disagrees with the signing algorithm."""

    def __init__(self, header_alg: object, algorithm: str) -> None:
        self.header_alg = header_alg
        self.algorithm = algorithm
        super().__init__(
            f"header alg {header_alg!r} does not match algorithm {algorithm}"
        )


class MissingSigningMaterialError(JwtGenError):
    """No usable secret or private key for the selected algorithm."""


class MissingSecretError(MissingSigningMaterialError):
    def __init__(self, detail: str = "secret value missing") -> None:
        super().__init__(detail)


class MissingPrivateKeyError(MissingSigningMaterialError):
    def __init__(self, detail: str = "private key missing") -> None:
        super().__init__(detail)


class InvalidSecretError(JwtGenError):
    """The secret cannot be encoded as UTF-8 bytes."""

    def __init__(self, detail: str = "invalid secret: not valid UTF-8") -> None:
        super().__init__(detail)


class InvalidPrivateKeyError(JwtGenError):
    """The key file was read but does not hold an unencrypted RSA key."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"invalid private key: {_printable(path)}")


class MalformedTokenError(JwtGenError):
    """A compact token could not be split and decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"malformed token: {reason}")
