"""LSD radix sort of lowercase names, one counting-sort pass per character.

Each pass reports the cumulative count vector of its counting sort: 27
entries, slot 0 for positions past the end of a name and slots 1 to 26 for
the letters ``a`` to ``z``.
"""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Iterable, Iterator
from itertools import accumulate

ALPHABET_SIZE = 27

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def char_index(ch: str) -> int:
    """Slot of ``ch`` in the count vector: 0 for the end of a name, else 1 to 26."""
    if ch in ("", "\0"):
        return 0
    if len(ch) != 1 or not "a" <= ch <= "z":
        raise ValueError(f"character {ch!r} is not a lowercase letter")
    return ord(ch) - ord("a") + 1


def _char_at(word: str, pos: int) -> str:
    return word[pos] if pos < len(word) else ""


def counting_pass(words: Iterable[str], pos: int) -> tuple[list[str], list[int]]:
    """Stably sort ``words`` by their character at ``pos``.

    Returns the reordered words and the cumulative count vector computed
    before the words are placed.
    """
    items = list(words)
    keys = [char_index(_char_at(word, pos)) for word in items]
    counts = [0] * ALPHABET_SIZE
    for key in keys:
        counts[key] += 1
    cumulative = list(accumulate(counts))
    ordered = [word for _, word in sorted(zip(keys, items), key=lambda pair: pair[0])]
    return ordered, cumulative


def _passes(words: list[str]) -> Iterator[tuple[list[str], list[int]]]:
    longest = max((len(word) for word in words), default=0)
    for pos in range(longest - 1, -1, -1):
        words, counts = counting_pass(words, pos)
        yield words, counts


def radix_sort(words: Iterable[str]) -> tuple[list[str], list[list[int]]]:
    """Sort ``words`` from the last character to the first.

    Returns the sorted words and the count vector of every pass, in the
    order the passes ran.
    """
    result = list(words)
    history: list[list[int]] = []
    for result, counts in _passes(result):
        history.append(counts)
    return result, history


def run(text: str) -> str:
    """Process a whole input document and return the program's output."""
    tokens = iter(text.split())
    try:
        size = int(next(tokens))
        words = [next(tokens).translate(_LOWER) for _ in range(size)]
        first = int(next(tokens))
        count = int(next(tokens))
    except StopIteration:
        raise ValueError("input ended before all values were read") from None
    if first < 1 or count < 0 or first - 1 + count > size:
        raise ValueError(
            f"cannot print {count} names from position {first} of {size}"
        )

    ordered, history = radix_sort(words)
    out = ["".join(f"{c} " for c in counts) + "\n" for counts in history]
    out.extend(f"{word}\n" for word in ordered[first - 1 : first - 1 + count])
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Radix-sort names read from standard input."
    )
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())