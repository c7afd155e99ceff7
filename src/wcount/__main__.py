"""Module entry point for ``python -m wcount``."""

import sys

from wcount.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
