"""Client database split into groups by a base-128 hash of the client name.

Each group keeps its clients in an AVL tree ordered by name; every client
holds the quantities of its orders in insertion order.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field


def hash_name(name: str, m: int) -> int:
    """Group of ``name``: the name read as a base-128 number, modulo ``m``."""
    if m < 1:
        raise ValueError("the number of groups must be positive")
    total = 0
    for ch in name:
        total = (total * 128 + ord(ch)) % m
    return total


@dataclass
class _Node:
    name: str
    quantities: list[int] = field(default_factory=list)
    height: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


class AVLTree:
    """Clients of one group, kept ordered by name."""

    def __init__(self):
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, name: str, quantity: int) -> None:
        """Add an order of ``quantity`` for ``name``, creating the client if new."""
        self._root = self._insert(self._root, name, quantity)

    def _insert(self, node: _Node | None, name: str, quantity: int) -> _Node:
        if node is None:
            self._size += 1
            return _Node(name, [quantity])
        if name < node.name:
            node.left = self._insert(node.left, name, quantity)
        elif name > node.name:
            node.right = self._insert(node.right, name, quantity)
        else:
            node.quantities.append(quantity)
            return node

        _update(node)
        balance = _balance(node)
        if balance > 1 and node.left is not None:
            if name > node.left.name:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and node.right is not None:
            if name < node.right.name:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def find(self, name: str) -> list[int] | None:
        """Quantities ordered by ``name`` in insertion order, or None if unknown."""
        node = self._root
        while node is not None:
            if name == node.name:
                return list(node.quantities)
            node = node.left if name < node.name else node.right
        return None

    def _walk(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def names(self) -> list[str]:
        """Client names in alphabetical order."""
        return [node.name for node in self._walk()]


class ClientTable:
    """Clients spread over ``size`` groups by :func:`hash_name`."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("the number of groups must be positive")
        self.size = size
        self._groups: dict[int, AVLTree] = {}

    def insert(self, name: str, quantity: int) -> None:
        """Record an order of ``quantity`` for ``name``."""
        index = hash_name(name, self.size)
        self._groups.setdefault(index, AVLTree()).insert(name, quantity)

    def lookup(self, name: str) -> tuple[list[str], list[int]] | None:
        """Names of the client's group and the client's quantities, or None."""
        group = self._groups.get(hash_name(name, self.size))
        if group is None:
            return None
        quantities = group.find(name)
        if quantities is None:
            return None
        return group.names(), quantities


def run(text: str) -> str:
    """Process a whole input document and return the program's output."""
    tokens = iter(text.split())
    try:
        table = ClientTable(int(next(tokens)))
    except StopIteration:
        raise ValueError("input holds no group count") from None

    out: list[str] = []
    try:
        for token in tokens:
            op = int(token)
            if op == 0:
                break
            if op == 1:
                name = next(tokens)
                table.insert(name, int(next(tokens)))
            elif op == 2:
                found = table.lookup(next(tokens))
                if found is None:
                    out.append("\n0\n")
                else:
                    names, quantities = found
                    out.append("".join(f"{n} " for n in names) + "\n")
                    out.append("".join(f"{q} " for q in quantities) + "\n")
    except StopIteration:
        raise ValueError("input ended in the middle of an operation") from None
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Group clients by name hash and answer lookups from standard input."
    )
    parser.parse_args(argv)
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())