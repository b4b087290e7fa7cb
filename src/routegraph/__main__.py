"""Main entry point for the routegraph package when run as a module.

This module enables running routegraph directly using 'python -m routegraph'.
"""

import sys

from . import cli

if __name__ == "__main__":
    sys.exit(cli.main())
