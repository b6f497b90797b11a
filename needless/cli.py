#!/usr/bin/env python3
"""
needless CLI - Entry point for pip-installed package.

Picks the line source (stdin, files or the staged diff), the output format
and diff mode, then prints one formatted block per suggestion.
"""

import argparse
import io
import logging
import sys
from typing import TextIO

from . import __version__
from .config import load_config, validate_config
from .formatters import FORMATTERS, SuggestionFormatter, get_formatter
from .logger import ScanStats, configure
from .scanner import read_file_lines, scan_lines
from .scanner_git import get_staged_diff

logger = logging.getLogger(__name__)


def _emit(suggestions, formatter: SuggestionFormatter, path: str | None, out: TextIO) -> int:
    count = 0
    for suggestion in suggestions:
        print(formatter(suggestion, path), file=out)
        count += 1
    return count


def run_scan(
    files: list[str],
    formatter: SuggestionFormatter,
    diff_mode: bool = False,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Scan *files* (or *stdin* when there are none) and return exit code.

    Line numbers restart at zero for every file. A file that cannot be read
    is skipped and makes the exit code 1; the other files are still scanned.
    """
    out = out or sys.stdout

    with ScanStats(logger) as stats:
        if not files:
            stats.inputs += 1
            stats.suggestions += _emit(scan_lines(stdin or sys.stdin, diff_mode), formatter, None, out)
        for path in files:
            stats.inputs += 1
            lines = read_file_lines(path)
            if lines is None:
                stats.failed += 1
                continue
            stats.suggestions += _emit(scan_lines(lines, diff_mode), formatter, path, out)

    if stats.failed:
        logger.error("%d file(s) could not be read", stats.failed)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="needless",
        description=(
            "Find needless words that merely repeat type information "
            "in your Swift function names."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  needless Sources/*.swift          Check files (human readable output)
  needless -Xcode Sources/*.swift   clang/swiftc style warnings
  git diff | needless -diff         Only check added lines of a diff
  needless --staged                 Check lines added in the staged diff

-dollar prints '$' separated fields:
  [description]$[path]$[line number]$[column number]$[original name]$[suggested name]
        """,
    )
    parser.add_argument("files", nargs="*", help="Files to check (default: stdin)")
    parser.add_argument(
        "-readable", dest="formats", action="append_const", const="readable",
        help="Print results in a human readable format",
    )
    parser.add_argument(
        "-Xcode", dest="formats", action="append_const", const="xcode",
        help="Print results as clang/swiftc style warnings",
    )
    parser.add_argument(
        "-dollar", dest="formats", action="append_const", const="dollar",
        help="Print results in '$' separated fields",
    )
    parser.add_argument(
        "--format", dest="formats", action="append", choices=sorted(FORMATTERS),
        help="Output format (same as the single-dash options)",
    )
    parser.add_argument(
        "-diff", "--diff", dest="diff", action="store_true", default=None,
        help="Only check lines that are additions in diff/patch formats",
    )
    parser.add_argument(
        "--staged", action="store_true",
        help="Check lines added in the staged git diff (implies -diff, takes no files)",
    )
    parser.add_argument("--config", "-c", help="Path to needless.yaml")
    parser.add_argument("--version", "-v", action="version", version=f"needless {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    configure()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.staged and args.files:
        parser.error("--staged reads the staged diff and cannot be combined with files")

    config = load_config(args.config)
    if not validate_config(config):
        sys.exit(1)

    formatter = get_formatter(args.formats[0] if args.formats else config["format"])
    diff_mode = config["diff"] if args.diff is None else args.diff

    if args.staged:
        diff = get_staged_diff()
        sys.exit(run_scan([], formatter, diff_mode=True, stdin=io.StringIO(diff)))

    sys.exit(run_scan(args.files, formatter, diff_mode=diff_mode))


if __name__ == "__main__":
    main()
