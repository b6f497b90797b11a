"""Logging setup for the needless command line tool.

Suggestions are printed to stdout; everything else (skipped files, config
problems, scan summaries) goes through the `needless` logger to stderr.

Configuration via environment variables:
  NEEDLESS_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
  NEEDLESS_LOG_FILE: optional path to also write logs to a file
  NEEDLESS_LOG_JSON: set to 1 for single-line JSON records
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time

ROOT_LOGGER = "needless"


class _JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        data = getattr(record, "data", None)
        if data is not None:
            entry["data"] = data
        return json.dumps(entry, default=str, ensure_ascii=False)


def _make_formatter() -> logging.Formatter:
    if os.environ.get("NEEDLESS_LOG_JSON") == "1":
        return _JSONFormatter()
    return logging.Formatter("needless: %(levelname)s: %(message)s")


_CONFIGURED = False


def configure() -> logging.Logger:
    """Configure the needless root logger (idempotent)."""
    global _CONFIGURED  # noqa: PLW0603
    root = logging.getLogger(ROOT_LOGGER)
    if _CONFIGURED:
        return root
    _CONFIGURED = True

    level_name = os.environ.get("NEEDLESS_LOG_LEVEL", "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(_make_formatter())
    root.addHandler(stderr_handler)

    log_file = os.environ.get("NEEDLESS_LOG_FILE")
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_make_formatter())
        root.addHandler(file_handler)

    root.propagate = False
    return root


class ScanStats:
    """Counts one scan and logs a structured summary when it ends.

    Usage:
        with ScanStats(logger) as stats:
            stats.inputs += 1
            stats.suggestions += len(found)
        if stats.failed: ...
    """

    __slots__ = ("_logger", "_start", "inputs", "suggestions", "failed", "ms")

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self.inputs = 0
        self.suggestions = 0
        self.failed = 0
        self.ms = 0.0

    def __enter__(self) -> ScanStats:
        self._start = time.monotonic()
        return self

    def __exit__(self, *_: object) -> None:
        self.ms = (time.monotonic() - self._start) * 1000
        self._logger.debug(
            "scan complete: %d input(s), %d suggestion(s), %d unreadable in %.1f ms",
            self.inputs, self.suggestions, self.failed, self.ms,
            extra={"data": {
                "inputs": self.inputs,
                "suggestions": self.suggestions,
                "failed": self.failed,
                "duration_ms": round(self.ms, 1),
            }},
        )
