"""Enumerate placements of n queens on an n-by-n board."""

import sys
from typing import Iterator, List, Tuple

from examkit.textint import atoi


def queen_placements(n: int) -> Iterator[Tuple[int, ...]]:
    """Yield every non-attacking placement as the column of each row's queen.

    Placements come out in lexicographic order. A board of size 0 has one
    empty placement; a negative size has none.
    """
    columns: List[int] = []

    def safe(col: int) -> bool:
        row = len(columns)
        return all(
            placed != col and abs(placed - col) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def search() -> Iterator[Tuple[int, ...]]:
        if len(columns) == n:
            yield tuple(columns)
            return
        for col in range(n):
            if safe(col):
                columns.append(col)
                yield from search()
                columns.pop()

    yield from search()


def main(argv=None) -> int:
    """Print each placement for the board size given as the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    out = sys.stdout
    for placement in queen_placements(atoi(args[0])):
        out.write(" ".join(str(col) for col in placement) + "\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())