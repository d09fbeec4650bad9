"""Find every subset of a list of integers that adds up to a target."""

import sys
from typing import Iterable, Iterator, List, Tuple

from examkit.textint import atoi


def subsets_with_sum(target: int, numbers: Iterable[int]) -> Iterator[Tuple[int, ...]]:
    """Yield the subsets of ``numbers`` whose sum equals ``target``.

    Subsets keep the input order and are produced depth first, choosing
    earlier elements before later ones. Once a subset reaches the target it
    is reported and not extended any further, so a target of 0 yields only
    the empty subset.
    """
    values = tuple(numbers)
    chosen: List[int] = []

    def search(start: int, total: int) -> Iterator[Tuple[int, ...]]:
        if total == target:
            yield tuple(chosen)
            return
        for index, value in enumerate(values[start:], start):
            chosen.append(value)
            yield from search(index + 1, total + value)
            chosen.pop()

    yield from search(0, 0)


def main(argv=None) -> int:
    """Print each subset of the arguments that sums to the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    target = atoi(args[0])
    numbers = [atoi(arg) for arg in args[1:]]
    out = sys.stdout
    for subset in subsets_with_sum(target, numbers):
        out.write("".join(f"{value} " for value in subset) + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())