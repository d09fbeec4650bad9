"""Lenient decimal integer parsing for command-line arguments."""

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit. When no digits are found the result is 0.
    """
    rest = text.lstrip("".join(_SPACE))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0
    value = int("".join(digits))
    return -value if negative else value