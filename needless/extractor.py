"""Recognise the head of a function declaration on a single line."""

import re

from .naming_types import Signature

# func <name>(<label> <param>: <Type>
SIGNATURE_REGEX = re.compile(
    r"\bfunc[ \t]+(\w+)\((?:(\w+)[ ]+)?(\w+)[ \t]*:[ \t]*(\w+)"
)

WILDCARD_LABEL = "_"


def extract_signature(line: str, line_number: int) -> Signature | None:
    """Return the first declaration head on *line*, or None.

    Only the first parameter is inspected. A `_` label is treated the same
    as no label at all.
    """
    match = SIGNATURE_REGEX.search(line)
    if not match:
        return None

    name, label, param, type_name = match.groups()
    if not (name and param and type_name):
        return None

    return Signature(
        original_text=line,
        line=line_number,
        column=match.start(),
        name=name,
        label=None if label == WILDCARD_LABEL else label,
        param=param,
        type_name=type_name,
    )
