"""Centralized configuration for the calculator.

This module defines:
- Input validation limits
- Cache sizes
- The history file location

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with CALCULATOR_)
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("cli-calculator")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("CALCULATOR_MAX_INPUT_LENGTH", "10000"))  # characters

# Cache configuration
CACHE_SIZE_TOKENIZE = int(os.getenv("CALCULATOR_CACHE_SIZE_TOKENIZE", "1024"))

# History persistence
HISTORY_FILE = os.getenv("CALCULATOR_HISTORY_FILE", "history.txt")
HISTORY_SEPARATOR = " = "
