"""Output formats for suggestions.

Every formatter takes a Suggestion plus the path it came from (None when
reading stdin) and returns the text to print.
"""

from typing import Callable, Optional

from .naming_types import Suggestion

SuggestionFormatter = Callable[[Suggestion, Optional[str]], str]

DEFAULT_FORMAT = "readable"


def dollar_formatter(suggestion: Suggestion, path: str | None) -> str:
    """`reason$path$line$column$old$new`, positions zero-based."""
    old, new, reason = suggestion
    return f"{reason}${path or ''}${old.line}${old.column}${old}${new}"


def xcode_formatter(suggestion: Suggestion, path: str | None) -> str:
    """clang/swiftc style warning, positions one-based."""
    old, new, reason = suggestion
    parts = [
        path or "",
        str(old.line + 1),
        str(old.column + 1),
        " warning",
        f" {reason} '{old} …'; perhaps use '{new} …' instead?",
    ]
    return ":".join(parts)


def readable_formatter(suggestion: Suggestion, path: str | None) -> str:
    old, new, reason = suggestion
    location = f"in {path} " if path else ""
    parts = [
        f"{reason} {location}(line {old.line})",
        old.original_text,
        " " * old.column + "^",
        f"possible alternative: {new} …",
        "",
    ]
    return "\n".join(parts)


FORMATTERS: dict[str, SuggestionFormatter] = {
    "readable": readable_formatter,
    "xcode": xcode_formatter,
    "dollar": dollar_formatter,
}


def get_formatter(name: str) -> SuggestionFormatter:
    """Look up a formatter by name; raises KeyError for unknown names."""
    return FORMATTERS[name.lower()]
