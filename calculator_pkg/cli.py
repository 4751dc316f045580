from __future__ import annotations

import argparse
import json
import sys
import tempfile
from pathlib import Path

from . import config
from .api import evaluate
from .config import VERSION
from .history import HistoryEntry, load_history, save_history
from .logging_config import get_logger, setup_logging
from .operators import OPERATORS
from .types import EvalResult, HistoryError

logger = get_logger("cli")

EXIT_COMMANDS = {"exit", "quit"}

# Command names understood by the REPL; anything else is evaluated
REPL_COMMANDS = EXIT_COMMANDS | {"history", "clear", "save", "last", "help"}


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    print("=", res.result)


def print_help_text() -> None:
    """Print help text for REPL commands."""
    print(
        f"""CLI Calculator version {VERSION}

Available commands:
  number op number  - Calculate (e.g., 5 + 3, (5 + 3) * 2, s 9)
  Operators         - + - * / % ^  s (square root, also √)
  history           - Show calculation history
  clear             - Clear history
  save              - Save history to file
  last              - Show last calculation
  help              - Show this help
  exit/quit         - Exit calculator
"""
    )


def _levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein distance between two strings."""
    if len(s1) < len(s2):
        return _levenshtein_distance(s2, s1)
    if len(s2) == 0:
        return len(s1)
    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


def suggest_command(raw: str) -> str | None:
    """Return the REPL command ``raw`` is probably a typo of, if any.

    Only words made of letters are considered, and words spelled purely
    from operator symbols (``s``, ``ss``) are left to the evaluator.
    """
    word = raw.lower()
    if not word.isalpha() or all(ch in OPERATORS for ch in word):
        return None

    best_match = None
    best_distance = len(word) + 1
    max_allowed = max(2, min(3, len(word) // 3))
    for cmd in sorted(REPL_COMMANDS):
        distance = _levenshtein_distance(word, cmd)
        if distance < best_distance and distance <= max_allowed:
            min_prefix_len = min(3, len(word), len(cmd))
            if word[:min_prefix_len] == cmd[:min_prefix_len] or distance <= 2:
                best_distance = distance
                best_match = cmd
    return best_match


def _save_history_or_report(history: list[HistoryEntry], history_file: str | None) -> bool:
    if history_file is None:
        print("History persistence is disabled.\n")
        return False
    try:
        save_history(history, history_file)
    except HistoryError as e:
        print(f"Error: {e}\n")
        return False
    print(f"History saved to '{history_file}'\n")
    return True


def handle_command(
    command: str, history: list[HistoryEntry], history_file: str | None
) -> None:
    """Run a housekeeping command other than exit/quit."""
    if command == "history":
        if not history:
            print("History is empty\n")
            return
        print("Calculation history:")
        for i, entry in enumerate(history, start=1):
            print(f"{i}. {entry}")
        print()
    elif command == "clear":
        history.clear()
        print("History cleared\n")
    elif command == "save":
        _save_history_or_report(history, history_file)
    elif command == "last":
        if history:
            print(f"Last calculation: {history[-1]}\n")
        else:
            print("No calculations yet\n")
    elif command == "help":
        print_help_text()


def repl_loop(history_file: str | None = None, output_format: str = "human") -> None:
    """Interactive REPL loop with graceful interrupt handling.

    Args:
        history_file: File the history is loaded from and saved to; None
            keeps history in memory only
        output_format: "human" or "json"
    """
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print(f"CLI Calculator {VERSION} - type 'help' for commands, 'exit' to quit.")

    history: list[HistoryEntry] = []
    if history_file is not None:
        history = load_history(history_file)
        if history:
            print(f"Loaded {len(history)} entries from {history_file}\n")

    while True:
        try:
            raw = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw:
            continue

        command = raw.lower()
        if command in EXIT_COMMANDS:
            break
        if command in REPL_COMMANDS:
            handle_command(command, history, history_file)
            continue

        suggestion = suggest_command(raw)
        if suggestion is not None:
            print(f"Unknown command '{raw}'. Did you mean '{suggestion}'?\n")
            continue

        try:
            res = evaluate(raw)
            print_result_pretty(res, output_format=output_format)
            if res.ok:
                history.append(HistoryEntry(raw, res.value))
            if output_format == "human":
                print()
        except Exception as e:
            logger.error(f"Unexpected error in REPL: {e}", exc_info=True)
            print("An error occurred. Please check your input and try again.\n")

    print("Goodbye!")
    if history_file is not None:
        try:
            save_history(history, history_file)
        except HistoryError as e:
            logger.warning(f"Failed to save history on exit: {e}")
            print(f"Warning: failed to save history: {e}", file=sys.stderr)


def _health_check() -> int:
    """Run health check to verify the tokenizer, evaluator and history file.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running calculator health check...")
    print("-" * 50)

    res = evaluate("(5 + 3) * 2 - s 16")
    if res.ok and res.value == 12.0:
        print("[OK] Basic evaluation works")
        checks_passed += 1
    else:
        print(f"[FAIL] Basic evaluation failed: expected 12, got {res!r}")
        checks_failed += 1

    res = evaluate("10 / 0")
    if not res.ok and res.error_code == "DIVISION_BY_ZERO":
        print("[OK] Error reporting works")
        checks_passed += 1
    else:
        print(f"[FAIL] Error reporting failed: {res!r}")
        checks_failed += 1

    try:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "history.txt"
            entries = [HistoryEntry("10 / 3", 10 / 3)]
            save_history(entries, path)
            loaded = load_history(path)
        if loaded == entries:
            print("[OK] History round trip works")
            checks_passed += 1
        else:
            print(f"[FAIL] History round trip failed: {loaded!r}")
            checks_failed += 1
    except (OSError, HistoryError) as e:
        print(f"[FAIL] History check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check complete: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the calculator CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="calculator")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        default=None,
        help=f"History file (default: {config.HISTORY_FILE})",
    )
    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not load or save the history file",
    )
    parser.add_argument(
        "--max-input-length",
        type=int,
        help="Reject expressions longer than this many characters",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify basic operations",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.max_input_length and args.max_input_length > 0:
        config.MAX_INPUT_LENGTH = int(args.max_input_length)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if not expr:
            print("Error: Empty input. Please enter an expression.")
            return 1
        res = evaluate(expr)
        print_result_pretty(res, output_format=args.format)
        return 0 if res.ok else 1

    history_file = None if args.no_history else (args.history_file or config.HISTORY_FILE)
    repl_loop(history_file=history_file, output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m calculator_pkg.cli"""
    sys.exit(main_entry())
