"""Entry point for ``python -m ccr``."""

import sys

from ccr.cli import main

if __name__ == "__main__":
    sys.exit(main())
