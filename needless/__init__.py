"""
needless - Spot function names that merely repeat their parameter's type.

Reads Swift source lines and suggests shorter labels or names, e.g.
`func removeFromArray(_ array: Array` -> `func remove(from array: Array`.
"""

__version__ = "1.0.0"

from .extractor import extract_signature
from .naming_types import Signature, Suggestion
from .naming_utils import common_suffix, tokenize
from .rules import PREPOSITIONS, RULES, evaluate
from .scanner import scan_file, scan_line, scan_lines

__all__ = [
    "extract_signature",
    "evaluate",
    "tokenize",
    "common_suffix",
    "Signature",
    "Suggestion",
    "PREPOSITIONS",
    "RULES",
    "scan_line",
    "scan_lines",
    "scan_file",
    "__version__",
]
