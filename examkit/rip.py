"""Balance parentheses by blanking out the fewest characters."""

import sys
from typing import Iterator, List


def removals_needed(text: str) -> int:
    """Return how many parentheses must go for ``text`` to be balanced."""
    unmatched_open = 0
    unmatched_close = 0
    for ch in text:
        if ch == "(":
            unmatched_open += 1
        elif ch == ")":
            if unmatched_open:
                unmatched_open -= 1
            else:
                unmatched_close += 1
    return unmatched_open + unmatched_close


def balanced_variants(text: str) -> Iterator[str]:
    """Yield every balanced form of ``text`` with the minimum blanked out.

    Removed characters are replaced by spaces, so each result has the same
    length as the input. Earlier removals are tried before later ones.
    """
    budget = removals_needed(text)
    built: List[str] = []

    def search(pos: int, depth: int, left: int) -> Iterator[str]:
        if pos == len(text):
            if depth == 0 and left == 0:
                yield "".join(built)
            return
        if left > 0:
            built.append(" ")
            yield from search(pos + 1, depth, left - 1)
            built.pop()
        ch = text[pos]
        if ch == "(":
            next_depth = depth + 1
        elif ch == ")":
            if depth == 0:
                return
            next_depth = depth - 1
        else:
            next_depth = depth
        built.append(ch)
        yield from search(pos + 1, next_depth, left)
        built.pop()

    yield from search(0, 0, budget)


def main(argv=None) -> int:
    """Print each balanced variant of the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    out = sys.stdout
    for variant in balanced_variants(args[0]):
        out.write(variant + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())