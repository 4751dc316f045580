#!/usr/bin/env python3
"""
CLI Calculator

Thin wrapper that delegates to the calculator_pkg package.

Usage:
    python calculator.py                    # Interactive REPL
    python calculator.py -e "5 + 3 * 2"     # Evaluate expression
    python calculator.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for the calculator.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from calculator_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
