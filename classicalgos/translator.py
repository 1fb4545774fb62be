"""Word-by-word translation through a small chained hash table.

Terms are single words; a translation may be several words.  Words with no
known translation are kept as they are.
"""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Iterable

BUCKETS = 83
LINE_BREAK = "@"


def bucket_of(word: str) -> int:
    """Bucket of ``word``: the djb2 hash in 32 unsigned bits, modulo the bucket count."""
    value = 5381
    for byte in word.encode():
        c = byte - 256 if byte > 127 else byte
        value = (value * 33 + c) & 0xFFFFFFFF
    return value % BUCKETS


class Dictionary:
    """Known terms and their translations; a later entry hides an earlier one."""

    def __init__(self):
        self._buckets: list[list[tuple[str, list[str]]]] = [[] for _ in range(BUCKETS)]

    def add(self, term: str, translation: str) -> None:
        """Record ``translation`` (split on spaces) for ``term``."""
        words = [part for part in translation.split(" ") if part]
        self._buckets[bucket_of(term)].insert(0, (term, words))

    def lookup(self, term: str) -> list[str] | None:
        """Words translating ``term``, or None if it is unknown."""
        for known, words in self._buckets[bucket_of(term)]:
            if known == term:
                return list(words)
        return None

    def translate_line(self, line: str) -> str:
        """Translate one line; every output word is followed by a space.

        A token ``@`` stands for a line break.
        """
        out: list[str] = []
        for token in (part for part in line.split(" ") if part):
            if token == LINE_BREAK:
                out.append("\n")
                continue
            words = self.lookup(token)
            out.extend(f"{w} " for w in (words if words is not None else [token]))
        return "".join(out)

    def translate(self, lines: Iterable[str]) -> str:
        """Translate lines as read from a file, ending the output with a newline."""
        out: list[str] = []
        for line in lines:
            if line.endswith("\n"):
                out.append(self.translate_line(line[:-1]))
                out.append("\n")
            else:
                out.append(self.translate_line(line))
        out.append("\n")
        return "".join(out)


def run(text: str) -> str:
    """Process a whole input document and return the program's output."""
    stream = io.StringIO(text)
    header = stream.readline().split()
    if len(header) < 2:
        raise ValueError("input must start with the term and line counts")
    try:
        term_count, line_count = int(header[0]), int(header[1])
    except ValueError:
        raise ValueError("term and line counts must be integers") from None

    dictionary = Dictionary()
    for _ in range(term_count):
        line = stream.readline()
        while line and not line.strip():
            line = stream.readline()
        if not line:
            raise ValueError("input ended before all terms were read")
        term = line.split()[0]
        translation = stream.readline()
        dictionary.add(term, translation.rstrip("\n"))

    lines: list[str] = []
    for _ in range(line_count):
        line = stream.readline()
        if not line:
            break
        lines.append(line)
    return dictionary.translate(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Translate text read from standard input word by word."
    )
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())