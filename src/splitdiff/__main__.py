#!/usr/bin/env python3
"""Entry point for running splitdiff as a module.

This allows the package to be executed as:
    python -m splitdiff original.txt modified.txt
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
