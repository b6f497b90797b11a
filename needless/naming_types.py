"""Type definitions for needless naming analysis."""

from typing import NamedTuple, Optional

REASON_LABEL = "potential needless words in first parameter label"
REASON_NAME = "potential needless words in function name"


class Signature(NamedTuple):
    """Head of one function declaration found on a source line."""

    original_text: str
    line: int  # zero-based
    column: int  # zero-based offset of `func`
    name: str
    label: Optional[str]  # None when omitted or written as `_`
    param: str
    type_name: str

    def __str__(self) -> str:
        return f"func {self.name}({self.label or '_'} {self.param}: {self.type_name}"


class Suggestion(NamedTuple):
    """A proposed rename of a signature and the reason for it."""

    original: Signature
    revised: Signature
    reason: str
