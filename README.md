# examkit

A handful of small console tools and the functions behind them: reading
lines from a stream in fixed-size chunks, masking a word in text, a tiny
scanf-style reader, subset sums, permutations, repairing unbalanced
parentheses, and the N-queens puzzle.

No third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `examkit-gnl`

Reads standard input line by line with `LineReader` and writes every line
back out. Lines are read through a 42-byte buffer and capped at 100000
bytes; anything after a NUL byte in a line is dropped.

```
printf 'one\ntwo\n' | examkit-gnl
```

### `examkit-filter WORD`

Copies standard input to standard output, replacing every occurrence of
`WORD` with as many `*` characters. It expects exactly one argument and
exits with status 1 otherwise.

```
echo 'abcabc' | examkit-filter bc
# a**a**
```

### `examkit-scanf`

Reads a word, then the literal `a`, then an integer from standard input
(the format `%s a%d`), and prints the word, the number and the count of
successful conversions. On empty input the count is printed as `-1`.

```
echo 'hello a42' | examkit-scanf
```

### `examkit-powerset TARGET N...`

Prints every subset of the given integers whose sum equals `TARGET`, one
per line, keeping the input order; each number is followed by a space.
Arguments are read leniently: leading whitespace and a sign are accepted,
parsing stops at the first non-digit, and text with no digits counts as 0.
Without arguments it exits with status 1.

```
examkit-powerset 3 1 0 2 4 5 3
```

### `examkit-permutations TEXT`

Prints every permutation of the characters of `TEXT`, in order starting
from the sorted characters. Repeated characters give repeated lines.

```
examkit-permutations abc
```

### `examkit-rip TEXT`

Prints every way of making a string of parentheses balanced with the
fewest removals; a removed character is shown as a space. It expects
exactly one argument.

```
examkit-rip '(()'
```

### `examkit-n-queens N`

Prints every placement of `N` non-attacking queens on an `N`×`N` board,
in lexicographic order. Each line gives the column of the queen in each
row, separated by spaces.

```
examkit-n-queens 4
```

## Library use

```python
import io

from examkit.gnl import LineReader
from examkit.filter import censor
from examkit.scanf import Scanner, scan
from examkit.powerset import subsets_with_sum
from examkit.permutations import sorted_permutations, binary_arrangements
from examkit.rip import removals_needed, balanced_variants
from examkit.n_queens import queen_placements
from examkit.textint import atoi

for line in LineReader(io.BytesIO(b"a\nb\n"), 42, 100000):
    print(line)                                  # b'a\n', then b'b\n'

print(censor("abcabc", "bc"))                    # a**a**
print(scan("%s a%d", io.StringIO("hello a42")))  # ['hello', 42]

for subset in subsets_with_sum(3, [1, 0, 2, 4, 5, 3]):
    print(subset)

print(list(sorted_permutations("cab")))
print(list(binary_arrangements(3)))

print(removals_needed("(()"))                    # 1
print(list(balanced_variants("(()")))

print(list(queen_placements(4)))                 # [(1, 3, 0, 2), (2, 0, 3, 1)]
print(atoi("  -17abc"))                          # -17
```

Notes on behaviour:

- `LineReader` accepts binary or text streams and returns lines of the same
  type; `read_line()` returns `None` at end of input, and iterating over the
  reader yields lines until then. A buffer size or maximum length below 1
  raises `ValueError`.
- `censor` masks in place from left to right, so later matches are looked
  for in the already masked text; an empty word leaves the line unchanged.
- `Scanner.scan` supports `%c`, `%d` and `%s`, skips input whitespace for
  whitespace in the format, and stops at the first conversion or literal
  that fails, returning the values read so far. It raises `EOFError` when
  the stream is already exhausted. A `Scanner` keeps its position (including
  one pushed-back character) between calls, for reading several formats one
  after another from the same input.
- `subsets_with_sum` stops extending a subset once it reaches the target, so
  a target of 0 yields only the empty subset.
- `binary_arrangements(size)` yields, for each count of ones from 0 to
  `size`, every positional permutation of that many ones followed by zeros,
  duplicates included.