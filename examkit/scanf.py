"""A small scanf-style reader supporting %c, %d and %s."""

import sys
from typing import List, Optional, Union

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

Value = Union[int, str]


class Scanner:
    """Read formatted values from a text stream, with one-character pushback."""

    def __init__(self, stream):
        self._stream = stream
        self._pushback: List[str] = []

    def _getc(self) -> Optional[str]:
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1) or None

    def _ungetc(self, ch: str) -> None:
        self._pushback.append(ch)

    def _next_non_space(self) -> Optional[str]:
        ch = self._getc()
        while ch is not None and ch in _SPACE:
            ch = self._getc()
        return ch

    def _skip_space(self) -> bool:
        ch = self._next_non_space()
        if ch is None:
            return False
        self._ungetc(ch)
        return True

    def _match(self, expected: str) -> bool:
        ch = self._getc()
        if ch is None:
            return False
        if ch != expected:
            self._ungetc(ch)
            return False
        return True

    def _scan_int(self) -> Optional[int]:
        ch = self._next_non_space()
        if ch is None:
            return None
        negative = False
        if ch in ("+", "-"):
            negative = ch == "-"
            ch = self._getc()
            if ch is None:
                return None
        digits = []
        while ch is not None and ch in _DIGITS:
            digits.append(ch)
            ch = self._getc()
        if ch is not None:
            self._ungetc(ch)
        if not digits:
            return None
        value = int("".join(digits))
        return -value if negative else value

    def _scan_string(self) -> Optional[str]:
        ch = self._next_non_space()
        if ch is None:
            return None
        chars = []
        while ch is not None and ch not in _SPACE:
            chars.append(ch)
            ch = self._getc()
        if ch is not None:
            self._ungetc(ch)
        return "".join(chars)

    def _convert(self, conversion: str) -> Optional[Value]:
        if conversion == "c":
            return self._getc()
        if conversion == "d":
            self._skip_space()
            return self._scan_int()
        if conversion == "s":
            self._skip_space()
            return self._scan_string()
        return None

    def scan(self, fmt: str) -> List[Value]:
        """Read values as described by ``fmt`` and return those converted.

        Scanning stops at the first conversion or literal that fails. Raises
        EOFError if the stream is already exhausted.
        """
        first = self._getc()
        if first is None:
            raise EOFError("no input to scan")
        self._ungetc(first)

        values: List[Value] = []
        pieces = iter(fmt)
        for ch in pieces:
            if ch == "%":
                value = self._convert(next(pieces, ""))
                if value is None:
                    break
                values.append(value)
            elif ch in _SPACE:
                if not self._skip_space():
                    break
            elif not self._match(ch):
                break
        return values


def scan(fmt: str, stream=None) -> List[Value]:
    """Scan ``fmt`` from ``stream``, standard input by default."""
    return Scanner(sys.stdin if stream is None else stream).scan(fmt)


def main(argv=None) -> int:
    """Read a word and an 'a'-prefixed number from standard input."""
    word = ""
    number = 0
    try:
        values = scan("%s a%d")
    except EOFError:
        count = -1
    else:
        count = len(values)
        if count >= 1:
            word = values[0]
        if count >= 2:
            number = values[1]
    sys.stdout.write(f"\n c : ! \n i : {number} \n s : {word}\n")
    sys.stdout.write(f"\t> R : {count}<\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())