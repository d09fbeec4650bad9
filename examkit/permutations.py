"""Print permutations of a word in alphabetical order."""

import sys
from itertools import permutations
from typing import Iterator


def sorted_permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters of ``text`` in sorted order.

    Positions are permuted, so repeated characters give repeated results.
    """
    for arrangement in permutations(sorted(text)):
        yield "".join(arrangement)


def binary_arrangements(size: int) -> Iterator[str]:
    """Yield arrangements of ``size`` binary digits, by count of ones.

    For each count of ones from 0 to ``size``, every positional permutation
    of that many ones followed by zeros is produced, duplicates included.
    """
    for ones in range(size + 1):
        digits = "1" * ones + "0" * (size - ones)
        for arrangement in permutations(digits):
            yield "".join(arrangement)


def main(argv=None) -> int:
    """Print the sorted permutations of the first argument, one per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    text = args[0]
    if not text:
        return 0
    out = sys.stdout
    for permutation in sorted_permutations(text):
        out.write(permutation + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())