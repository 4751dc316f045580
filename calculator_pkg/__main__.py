"""Main entry point for running calculator_pkg as a module.

This allows running the calculator with:
    python -m calculator_pkg
    python -m calculator_pkg --health-check
    python -m calculator_pkg -e "2+2"

This is equivalent to running:
    python -m calculator_pkg.cli
    python calculator.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
