"""Calculation history and its plain-text persistence.

Each record is one line, ``<expression> = <result>``. When loading, the
first `` = `` separates the expression from the result; lines without a
separator or with an unparsable result are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .api import format_result
from .config import HISTORY_SEPARATOR
from .logging_config import get_logger
from .types import HistoryError

logger = get_logger("history")


@dataclass
class HistoryEntry:
    """A successful calculation."""

    expression: str
    result: float

    def __str__(self) -> str:
        return f"{self.expression}{HISTORY_SEPARATOR}{format_result(self.result)}"


def parse_history_line(line: str) -> HistoryEntry | None:
    """Parse one history record, returning None if it is malformed."""
    pos = line.find(HISTORY_SEPARATOR)
    if pos == -1:
        return None
    try:
        result = float(line[pos + len(HISTORY_SEPARATOR):])
    except ValueError:
        return None
    return HistoryEntry(line[:pos], result)


def load_history(path: str | Path) -> list[HistoryEntry]:
    """Load history entries from ``path``.

    A missing or unreadable file yields an empty history.
    """
    history_file = Path(path)
    if not history_file.exists():
        return []
    try:
        content = history_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read history from {history_file}: {e}")
        return []

    entries = []
    for lineno, line in enumerate(content.splitlines(), start=1):
        entry = parse_history_line(line)
        if entry is None:
            logger.debug(f"Skipping malformed history line {lineno}: {line!r}")
            continue
        entries.append(entry)
    logger.info(f"Loaded {len(entries)} history entries from {history_file}")
    return entries


def save_history(entries: list[HistoryEntry], path: str | Path) -> None:
    """Write every entry to ``path``, replacing its contents.

    Raises:
        HistoryError: the file cannot be written
    """
    history_file = Path(path)
    try:
        with open(history_file, "w", encoding="utf-8") as f:
            for entry in entries:
                f.write(f"{entry}\n")
    except OSError as e:
        raise HistoryError(
            f"Cannot write history to '{history_file}': {e}", code="HISTORY_WRITE_ERROR"
        ) from e
    logger.info(f"Saved {len(entries)} history entries to {history_file}")
