"""Naming rules that spot words repeating the first parameter's type.

Each rule is a pure function taking a Signature and returning a Suggestion or
None. RULES fixes the order in which suggestions are reported.
"""

from typing import Callable, Optional

from .naming_types import REASON_LABEL, REASON_NAME, Signature, Suggestion
from .naming_utils import common_suffix, tokenize

PREPOSITIONS = frozenset({
    "aboard", "about", "above", "across", "after", "against", "along", "amid",
    "among", "anti", "around", "as", "at", "before", "behind", "below",
    "beneath", "beside", "besides", "between", "beyond", "but", "by",
    "concerning", "considering", "despite", "down", "during", "except",
    "excepting", "excluding", "following", "for", "from", "in", "inside",
    "into", "like", "minus", "near", "of", "off", "on", "onto", "opposite",
    "outside", "over", "past", "per", "plus", "regarding", "round", "save",
    "since", "than", "through", "to", "toward", "towards", "under",
    "underneath", "unlike", "until", "up", "upon", "versus", "via", "with",
    "within", "without",
})

Rule = Callable[[Signature], Optional[Suggestion]]


def needless_words_in_label(head: Signature) -> Suggestion | None:
    """`insert(newPerson aPerson: Person` -> `insert(new aPerson: Person`."""
    if head.label is None or head.name == head.param:
        return None

    label_parts = tokenize(head.label)
    last = label_parts[-1].lower()
    if not (head.param.lower().endswith(last) and head.type_name.lower().endswith(last)):
        return None

    common = common_suffix(label_parts, tokenize(head.type_name))
    p = len(label_parts) - len(common)
    revised = head._replace(label="".join(label_parts[:p]))
    return Suggestion(head, revised, REASON_LABEL)


def needless_words_in_name(head: Signature) -> Suggestion | None:
    """`removeFromArray(_ array: Array` -> `remove(from array: Array`.

    Only fires when the word right before the repeated type name is a
    preposition, which then becomes the first parameter's label.
    """
    if head.label is not None or head.name == head.param:
        return None

    name_parts = tokenize(head.name)
    common = common_suffix(tokenize(head.type_name), name_parts)
    if not common or len(name_parts) <= len(common):
        return None

    p = len(name_parts) - len(common) - 1
    preposition = name_parts[p].lower()
    if preposition not in PREPOSITIONS:
        return None

    revised = head._replace(name="".join(name_parts[:p]), label=preposition)
    return Suggestion(head, revised, REASON_NAME)


RULES: tuple[Rule, ...] = (
    needless_words_in_label,
    needless_words_in_name,
)


def evaluate(head: Signature, rules: tuple[Rule, ...] = RULES) -> list[Suggestion]:
    """Apply *rules* in order and collect the suggestions they produce."""
    suggestions = []
    for rule in rules:
        suggestion = rule(head)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions
