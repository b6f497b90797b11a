"""Identifier helpers shared by the naming rules."""


def tokenize(identifier: str) -> list[str]:
    """Split an identifier before every character that is not a-z.

    Joining the tokens gives back the identifier. The pending token is always
    emitted, so "" gives [""] and "Person" gives ["", "Person"].
    """
    tokens = []
    word = ""
    for char in identifier:
        if "a" <= char <= "z":
            word += char
        else:
            tokens.append(word)
            word = char
    tokens.append(word)
    return tokens


def common_suffix(a: list[str], b: list[str]) -> list[str]:
    """Longest run of trailing tokens shared by *a* and *b*, ignoring case.

    Tokens keep the casing they have in *a*.
    """
    matched = []
    for x, y in zip(reversed(a), reversed(b)):
        if x.lower() != y.lower():
            break
        matched.append(x)
    matched.reverse()
    return matched
