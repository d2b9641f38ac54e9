import random

import pytest

from labbench.bst import BinarySearchTree, main, run_commands


def test_add_rejects_duplicates():
    tree = BinarySearchTree()
    assert tree.add(5) is True
    assert tree.add(5) is False
    assert len(tree) == 1


def test_contains_and_len():
    tree = BinarySearchTree([5, 3, 8, 1, 4])
    assert len(tree) == 5
    assert all(value in tree for value in (1, 3, 4, 5, 8))
    assert 7 not in tree


def test_empty_tree_prints_empty():
    assert str(BinarySearchTree()) == "empty"


def test_level_order_rendering():
    tree = BinarySearchTree([5, 3, 8])
    assert str(tree) == "  1: 5\n  2: 3 8"


def test_remove_root_uses_predecessor():
    tree = BinarySearchTree([5, 3, 8])
    assert tree.remove(5) is True
    assert str(tree) == "  1: 3\n  2: _ 8"


def test_remove_missing_value():
    tree = BinarySearchTree([2, 1])
    assert tree.remove(9) is False
    assert len(tree) == 2


def test_remove_last_value_empties_tree():
    tree = BinarySearchTree([4])
    assert tree.remove(4) is True
    assert len(tree) == 0
    assert str(tree) == "empty"


def test_clear():
    tree = BinarySearchTree([3, 1, 2])
    tree.clear()
    assert len(tree) == 0
    assert 1 not in tree


def test_string_values():
    tree = BinarySearchTree(["pear", "apple", "zebra"])
    assert "apple" in tree
    assert tree.remove("pear") is True
    assert "pear" not in tree
    assert len(tree) == 2


def test_random_operations_match_a_set():
    rng = random.Random(7)
    tree = BinarySearchTree()
    expected = set()
    for _ in range(500):
        value = rng.randrange(60)
        if rng.random() < 0.6:
            assert tree.add(value) == (value not in expected)
            expected.add(value)
        else:
            assert tree.remove(value) == (value in expected)
            expected.discard(value)
        assert len(tree) == len(expected)
    assert all(value in tree for value in expected)
    assert not any(value in tree for value in set(range(60)) - expected)


def test_run_commands_int_session():
    lines = ["INT", "add 5", "add 5", "find 5", "find 7", "size", "print", "remove 5", "print"]
    assert run_commands(lines) == [
        "INT true",
        "add 5 true",
        "add 5 false",
        "find 5 found",
        "find 7 not found",
        "size 1",
        "print:",
        "  1: 5",
        "remove 5 true",
        "print: empty",
    ]


def test_run_commands_string_session_matches_tree():
    output = run_commands(["STRING", "add b", "add a", "find a", "clear", "size"])
    assert output[0] == "STRING true"
    assert output[3] == "find a found"
    assert output[4] == "clear true"
    assert output[5] == "size 0"


def test_run_commands_print_matches_str():
    tree = BinarySearchTree([10, 4, 12])
    output = run_commands(["INT", "add 10", "add 4", "add 12", "print"])
    assert output[4:] == ["print:"] + str(tree).splitlines()


def test_run_commands_without_tree():
    with pytest.raises(ValueError):
        run_commands(["add 1"])


def test_run_commands_bad_int():
    with pytest.raises(ValueError):
        run_commands(["INT", "add x"])


def test_main_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    commands = ["INT", "add 2", "add 1", "size"]
    source.write_text("\n".join(commands) + "\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8").splitlines() == run_commands(commands)


def test_main_needs_two_arguments():
    assert main(["only-one"]) == 1