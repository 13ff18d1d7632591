"""
Entry point for running iconvert as a module.

Usage:
    python -m iconvert convert 1 km m
    python -m iconvert units
"""

import sys

from iconvert.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
