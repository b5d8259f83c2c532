"""
Main module entry point.

This allows running a single status check as: python -m official_status.main
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
