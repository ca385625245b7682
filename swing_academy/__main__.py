"""Module entrypoint for `python -m swing_academy`."""

import sys

from swing_academy.cli import main

if __name__ == "__main__":
    sys.exit(main())
