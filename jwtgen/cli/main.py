"""jwtgen console entry point."""

import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from jwtgen.cli.parser import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    build_parser,
    request_from_args,
)
from jwtgen.core.errors import JwtGenError
from jwtgen.core.log_setup import configure_logging
from jwtgen.core.settings import CliSettings
from jwtgen.token.service import issue_with_report

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, issue one token, and print it.

    Nothing reaches stdout unless the whole pipeline succeeds.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = CliSettings()
    except ValidationError as e:
        parser.print_help(sys.stderr)
        print(f"invalid environment: {e}", file=sys.stderr)
        return EXIT_FAILURE
    configure_logging(settings.log_level)

    try:
        request = request_from_args(args, settings)
    except ValidationError as e:
        # field names only, the rejected input may be the secret
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        parser.print_help(sys.stderr)
        print(f"invalid arguments: {fields}", file=sys.stderr)
        return EXIT_FAILURE
    try:
        issued = issue_with_report(request)
    except JwtGenError as e:
        logger.debug("token generation failed: %s", type(e).__name__)
        parser.print_help(sys.stderr)
        print(e.detail, file=sys.stderr)
        return e.exit_code

    if issued.report is not None:
        print(issued.report)
    print(issued.token)
    return EXIT_SUCCESS
