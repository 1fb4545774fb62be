"""Command chain of a faction: the longest prison time among a member's bosses.

Members form a directed graph where an edge from X to Y means X directly
commands Y.  Members may swap positions in the hierarchy, each keeping their
own prison time, and queries ask for the largest prison time among all
direct or indirect bosses of a member.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


class Faction:
    """A hierarchy of members, each with a prison time, numbered from 1."""

    def __init__(self, times: Iterable[int], relations: Iterable[tuple[int, int]]):
        self._times = list(times)
        size = len(self._times)
        # Bosses of each position in the hierarchy.
        self._bosses: list[list[int]] = [[] for _ in range(size)]
        # Position currently occupied by each member.
        self._slot = list(range(size))
        for boss, subordinate in relations:
            self._check(boss)
            self._check(subordinate)
            self._bosses[subordinate - 1].append(boss - 1)

    def __len__(self) -> int:
        return len(self._times)

    def _check(self, member: int) -> None:
        if not 1 <= member <= len(self._times):
            raise IndexError(f"no member numbered {member}")

    def swap(self, a: int, b: int) -> None:
        """Exchange the positions of members ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        slot_a, slot_b = self._slot[a - 1], self._slot[b - 1]
        self._times[slot_a], self._times[slot_b] = self._times[slot_b], self._times[slot_a]
        self._slot[a - 1], self._slot[b - 1] = slot_b, slot_a

    def max_boss_time(self, member: int) -> int | None:
        """Largest prison time among the bosses of ``member``, or None if it has none."""
        self._check(member)
        start = self._slot[member - 1]
        visited: set[int] = set()
        pending = list(self._bosses[start])
        best: int | None = None
        while pending:
            current = pending.pop()
            if current in visited:
                continue
            visited.add(current)
            years = self._times[current]
            if best is None or years > best:
                best = years
            pending.extend(n for n in self._bosses[current] if n not in visited)
        return best


def _ints(tokens: Iterator[str]) -> Iterator[int]:
    for token in tokens:
        yield int(token)


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"input ended while reading {what}") from None


def _take_int(tokens: Iterator[str], what: str) -> int:
    token = _take(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def run(text: str) -> str:
    """Process a whole input document and return the program's output."""
    tokens = iter(text.split())
    members = _take_int(tokens, "the number of members")
    relation_count = _take_int(tokens, "the number of relations")
    instruction_count = _take_int(tokens, "the number of instructions")
    times = [_take_int(tokens, "a prison time") for _ in range(members)]
    relations = [
        (_take_int(tokens, "a boss"), _take_int(tokens, "a subordinate"))
        for _ in range(relation_count)
    ]
    faction = Faction(times, relations)

    lines: list[str] = []
    for _ in range(instruction_count):
        op = _take(tokens, "an instruction")
        if op == "P":
            result = faction.max_boss_time(_take_int(tokens, "a member"))
            lines.append("*" if result is None else str(result))
        elif op == "T":
            a = _take_int(tokens, "a member")
            b = _take_int(tokens, "a member")
            faction.swap(a, b)
        else:
            raise ValueError(f"unknown instruction {op!r}")
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Answer boss prison-time queries read from standard input."
    )
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())