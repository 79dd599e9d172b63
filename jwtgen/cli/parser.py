"""Argument parsing and conversion into a TokenRequest."""

import argparse
import math
import sys
from typing import NoReturn

from jwtgen.claims.types import TokenRequest
from jwtgen.core.settings import CliSettings
from jwtgen.crypto.types import Algorithm

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints full usage and exits 1 on bad input."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(EXIT_FAILURE, f"{message}\n")


def finite_float(text: str) -> float:
    """argparse type for a number that must be finite."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"number must be finite: {text!r}")
    return value


def build_parser() -> CliArgumentParser:
    # -h is the header flag, so help is only reachable as --help
    parser = CliArgumentParser(
        prog="jwtgen",
        description="Assemble and sign a JSON Web Token.",
        add_help=False,
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        required=True,
        choices=[a.value for a in Algorithm],
        help="signing algorithm",
    )
    parser.add_argument("-s", "--secret", help="secret value for HMAC algorithm")
    parser.add_argument(
        "-p",
        "--private",
        help="private key file (required for RS256 algorithm)",
    )
    parser.add_argument(
        "-c",
        "--claim",
        action="append",
        default=[],
        help="claim in the form [key=value] (repeatable)",
    )
    parser.add_argument("--claims", help="JSON string containing claims")
    parser.add_argument(
        "-h",
        "--header",
        action="append",
        default=[],
        help="header in the form [key=value] (repeatable)",
    )
    parser.add_argument("--headers", help="JSON string containing additional headers")
    parser.add_argument(
        "-i",
        "--iat",
        type=finite_float,
        help="issued at (iat) in seconds from the UNIX epoch, "
        "negative for an offset from now (default: now)",
    )
    parser.add_argument(
        "-e",
        "--exp",
        type=finite_float,
        help="expiry date in seconds from issued at (iat) time",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("--help", action="help", help="show this help message and exit")
    return parser


def request_from_args(args: argparse.Namespace, settings: CliSettings) -> TokenRequest:
    """Flags win; the environment only fills in missing signing material."""
    return TokenRequest(
        algorithm=Algorithm(args.algorithm),
        secret=args.secret or settings.secret,
        private_key_path=args.private or settings.private_key,
        claim_entries=tuple(args.claim),
        claims_json=args.claims,
        header_entries=tuple(args.header),
        headers_json=args.headers,
        iat=args.iat,
        exp=args.exp,
        verbose=args.verbose,
    )
