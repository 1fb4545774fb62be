import random
import string

import pytest

from classicalgos.client_groups import AVLTree, ClientTable, hash_name, run


def test_hash_single_character_is_ascii_code():
    assert hash_name("a", 1000) == 97


def test_hash_in_range():
    for name in ["alice", "bob", "zzzzzzzzzzzzzz", "x"]:
        for m in (3, 7, 1009, 999983):
            assert 0 <= hash_name(name, m) < m


def test_hash_empty_name():
    assert hash_name("", 17) == 0


def test_hash_rejects_zero_groups():
    with pytest.raises(ValueError):
        hash_name("bob", 0)


def test_tree_names_sorted_and_unique():
    rng = random.Random(1)
    tree = AVLTree()
    inserted = []
    for _ in range(500):
        name = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(1, 5)))
        tree.insert(name, 1)
        inserted.append(name)
    assert tree.names() == sorted(set(inserted))
    assert len(tree) == len(set(inserted))


def test_tree_quantities_in_insertion_order():
    tree = AVLTree()
    for q in (4, 1, 9, 3):
        tree.insert("ana", q)
    tree.insert("beto", 2)
    assert tree.find("ana") == [4, 1, 9, 3]
    assert tree.find("beto") == [2]


def test_tree_find_missing():
    tree = AVLTree()
    tree.insert("ana", 1)
    assert tree.find("zed") is None


def test_sequential_inserts_stay_sorted():
    tree = AVLTree()
    names = [f"n{i:03d}" for i in range(200)]
    for name in names:
        tree.insert(name, 0)
    assert tree.names() == names


def test_table_single_group_lists_everyone():
    table = ClientTable(1)
    table.insert("carol", 3)
    table.insert("alice", 1)
    table.insert("bob", 2)
    table.insert("alice", 7)
    assert table.lookup("bob") == (["alice", "bob", "carol"], [2])
    assert table.lookup("alice") == (["alice", "bob", "carol"], [1, 7])


def test_table_groups_hold_only_colliding_names():
    table = ClientTable(1009)
    names = ["alice", "bob", "carol", "dave", "eve"]
    for name in names:
        table.insert(name, 1)
    for name in names:
        group, _ = table.lookup(name)
        assert name in group
        assert all(hash_name(other, 1009) == hash_name(name, 1009) for other in group)


def test_table_missing_client():
    table = ClientTable(5)
    table.insert("bob", 5)
    assert table.lookup("nobody") is None


def test_table_rejects_zero_size():
    with pytest.raises(ValueError):
        ClientTable(0)


def test_run_found_and_missing():
    text = "1000\n1 bob 5\n1 bob 7\n2 bob\n2 zed\n0\n"
    assert run(text) == "bob \n5 7 \n\n0\n"


def test_run_stops_at_zero():
    text = "10\n1 ana 2\n0\n2 ana\n"
    assert run(text) == ""


def test_run_truncated_operation():
    with pytest.raises(ValueError):
        run("10\n1 ana\n")