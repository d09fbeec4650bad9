"""Mask every occurrence of a word in standard input with asterisks."""

import os
import sys
from typing import Union

from examkit.gnl import LineReader

Text = Union[bytes, str]


def censor(line: Text, word: Text) -> Text:
    """Replace each occurrence of ``word`` in ``line`` with asterisks.

    The line is scanned left to right and masked in place, so a later match
    is looked for in the already masked text. An empty word changes nothing.
    """
    if not word:
        return line
    star = "*" if isinstance(line, str) else b"*"
    mask = star * len(word)
    result = line
    for start in range(len(result)):
        if result.startswith(word, start):
            result = result[:start] + mask + result[start + len(word):]
    return result


def main(argv=None) -> int:
    """Copy standard input to standard output with the word masked."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    word = os.fsencode(args[0])
    out = sys.stdout.buffer
    for line in LineReader(sys.stdin.buffer):
        out.write(censor(line, word))
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())