"""Run jwtgen as ``python -m jwtgen``."""

import sys

from jwtgen.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
