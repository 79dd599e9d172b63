"""Token issuance: validate inputs, build sets, sign, and assemble."""

import logging

from pydantic import BaseModel, ConfigDict

from jwtgen.claims.merger import build_claims, build_headers
from jwtgen.claims.types import TokenRequest
from jwtgen.crypto.keys import resolve_signing_material
from jwtgen.crypto.signer import sign
from jwtgen.token.assembler import assemble
from jwtgen.token.reporter import decode, render

logger = logging.getLogger(__name__)


class IssuedToken(BaseModel):
    """A compact token plus the text to print before it in verbose mode."""

    model_config = ConfigDict(frozen=True)

    token: str
    report: str | None = None


def issue_token(request: TokenRequest, now: float | None = None) -> str:
    """Produce one signed compact token for the request."""
    logger.debug("issuing token with %s", request.algorithm)
    material = resolve_signing_material(
        request.algorithm, request.secret, request.private_key_path
    )
    claims = build_claims(request, now)
    headers = build_headers(request)
    segments = sign(headers, claims, request.algorithm, material)
    return assemble(segments)


def issue_with_report(request: TokenRequest, now: float | None = None) -> IssuedToken:
    """Issue a token and, when verbose, decode it back for display."""
    token = issue_token(request, now)
    if not request.verbose:
        return IssuedToken(token=token)
    report = render(decode(token), request.algorithm.value)
    return IssuedToken(token=token, report=report)
