"""Module entry point for running with python -m docpages."""

import sys

from docpages.cli import main

if __name__ == "__main__":
    sys.exit(main())
