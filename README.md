# classicalgos

This package contains four small algorithm programs. Each one reads its whole input from standard input
and writes its answers to standard output. None of them takes command-line
options except `--help`.

## Installation

    pip install .

Install with `pip install .[test]` to get the test dependencies, then run `pytest`.

## Commands

### command-chain

This command models the chain of command in a faction as a directed graph.
Every member has a prison time, and members can swap positions. Each member
keeps their own prison time when they swap. A query `P E` prints the largest
prison time among all direct and indirect bosses of member `E`. It prints `*`
when `E` has no boss.

    command-chain < input.txt

Input is a line with `N M I`, then a line with the `N` prison times, then `M`
pairs `X Y` meaning that X commands Y, then `I` instructions, each `T A B` or
`P E`. Members are numbered from 1. An unknown instruction, a member number out
of range, or input that ends early raises an error.

### client-groups

This command spreads clients over `m` groups. The first token of the input is
`m`. A client's group is the name read as a base-128 number, modulo `m`. Each
group is kept in an AVL tree ordered by name.

- `1 name qty` inserts a client, or appends a quantity to an existing client.
- `2 name` prints the names in the client's group in alphabetical order, then
  the client's quantities in insertion order. Each value is followed by a space.
  When the client is not found, it prints an empty line and then `0`.
- `0` stops processing. Input that ends without a `0` also stops processing.

### radix-sort

This command sorts names with an LSD radix sort that uses one counting-sort
pass per character position, from the last position to the first. Names are
lower-cased first, and they may contain only the letters `a` to `z`. For each
pass it prints the 27 cumulative counts: slot 0 counts the names that end
before that position, and slots 1 to 26 count the letters `a` to `z`. After
that it prints `M` names, starting at position `P` of the sorted list.

Input is `N`, then `N` names, then `P M`. A range that does not fit inside the
list raises an error.

### translator

This command translates text word by word.

Input is a line with `M N`. Then come `M` pairs of lines: a term, and its
translation, which may be several words. Then come `N` lines of text. Each word
of the text with a known translation is replaced by that translation, and any
other word is printed unchanged. Every output word is followed by a space. If a
term is given twice, the later translation is used.

## Library use

```python
from classicalgos.command_chain import Faction
from classicalgos.client_groups import AVLTree, ClientTable, hash_name
from classicalgos.radix import counting_pass, radix_sort
from classicalgos.translator import Dictionary

faction = Faction([5, 3, 9], [(1, 2), (2, 3)])
faction.max_boss_time(3)        # 5
faction.max_boss_time(1)        # None (no bosses)
faction.swap(1, 3)

table = ClientTable(7)
table.insert("ana", 4)
table.lookup("ana")             # (["ana", ...group names], [4])
table.lookup("bia")             # None if unknown

words, counts = radix_sort(["bob", "al"])   # sorted words and each pass's counts

d = Dictionary()
d.add("hola", "oi")
d.lookup("hola")                # ["oi"]
d.translate_line("hola mundo")  # "oi mundo "
```

Every module also has a `run(text)` function. It takes the whole input as a
string and returns the program's output. Its `main(argv=None)` function is the
entry point for that module's command.