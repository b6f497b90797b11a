"""
needless - Find words in Swift function names that repeat type information.

Runs each source line through the signature extractor and the naming rules.
The scanner knows nothing about output formats; callers format and print the
suggestions it yields.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .extractor import extract_signature
from .naming_types import Suggestion
from .rules import evaluate

logger = logging.getLogger(__name__)

# Markers for added/changed lines in unified, context and normal diffs
DIFF_ADDITION_PREFIXES = ("+", "!", ">")


def is_diff_addition(line: str) -> bool:
    """Check if a diff line adds or changes code."""
    return line.startswith(DIFF_ADDITION_PREFIXES)


def scan_line(line: str, line_number: int, diff_mode: bool = False) -> list[Suggestion]:
    """Return the suggestions for a single line."""
    if diff_mode and not is_diff_addition(line):
        return []
    head = extract_signature(line, line_number)
    if head is None:
        return []
    return evaluate(head)


def scan_lines(
    lines: Iterable[str], diff_mode: bool = False, start: int = 0,
) -> Iterator[Suggestion]:
    """Yield suggestions for *lines*, numbering them from *start*."""
    for line_number, line in enumerate(lines, start):
        yield from scan_line(line.rstrip("\r\n"), line_number, diff_mode)


def scan_file(filepath: str, diff_mode: bool = False) -> list[Suggestion]:
    """Scan one file; unreadable files are logged and give no suggestions.

    Use read_file_lines() directly when the caller needs to know whether the
    file could be read.
    """
    lines = read_file_lines(filepath)
    if lines is None:
        return []
    return list(scan_lines(lines, diff_mode))


def read_file_lines(filepath: str) -> list[str] | None:
    """Read a file as lines, or None (logged) when it cannot be read."""
    try:
        content = Path(filepath).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("SKIP %s (read error: %s)", filepath, e)
        return None
    return content.splitlines()
