import random

import pytest

from huff_errors import TreeInvariantError
from huff_tree import HuffmanNode, HuffmanTree, build_tree

from conftest import SIX_ALPHABET, SIX_FREQS


def test_three_symbol_merges():
    tree = build_tree({"a": 25, "e": 40, "i": 23}, ["a", "e", "i"])
    root = tree.root_node
    assert root.freq == 88 and root.seq_id == 2

    left, right = tree.children(tree.root)
    assert left == HuffmanNode(freq=40, sym="e")
    assert right.freq == 48 and right.seq_id == 1

    first, second = tree.children(root.right)
    assert first.sym == "i" and first.freq == 23
    assert second.sym == "a" and second.freq == 25


def test_missing_symbols_default_to_zero():
    tree = build_tree({"a": 3}, ["a", "b"])
    leaves = {n.sym: n.freq for n in tree.leaves()}
    assert leaves == {"a": 3, "b": 0}
    assert tree.root_node.freq == 3


def test_leaf_wins_tie_against_internal():
    # a+b merge to 2, tying with leaf c
    tree = build_tree({"a": 1, "b": 1, "c": 2}, ["a", "b", "c"])
    left, right = tree.children(tree.root)
    assert left.sym == "c"
    assert right.seq_id == 1


def test_leaf_ties_break_on_symbol_not_alphabet_order():
    tree = build_tree({}, ["b", "a"])
    left, right = tree.children(tree.root)
    assert (left.sym, right.sym) == ("a", "b")


def test_internal_ties_break_on_creation_order():
    tree = build_tree({}, ["d", "c", "b", "a"])
    left, right = tree.children(tree.root)
    assert (left.seq_id, right.seq_id) == (1, 2)
    assert [n.sym for n in tree.children(tree.root_node.left)] == ["a", "b"]


@pytest.mark.parametrize("n", [2, 3, 5, 26, 27, 100])
def test_tree_shape(n):
    rng = random.Random(n)
    alphabet = [chr(0x41 + i) for i in range(n)]
    freqs = {s: rng.randint(0, 50) for s in alphabet}
    tree = build_tree(freqs, alphabet)

    assert len(tree.leaves()) == n
    assert len(tree.internals()) == n - 1
    assert sorted(n.sym for n in tree.leaves()) == sorted(alphabet)
    for node in tree.internals():
        assert node.left is not None and node.right is not None
        assert node.freq == tree.nodes[node.left].freq + tree.nodes[node.right].freq
    assert tree.root_node.freq == sum(freqs.values())


def test_build_is_deterministic():
    a = build_tree(SIX_FREQS, SIX_ALPHABET)
    b = build_tree(dict(reversed(list(SIX_FREQS.items()))), SIX_ALPHABET)
    assert a == b


def test_single_symbol_tree_is_a_leaf():
    tree = build_tree({"x": 4}, ["x"])
    assert tree.root_node.is_leaf
    assert tree.internals() == []
    with pytest.raises(TreeInvariantError):
        tree.children(tree.root)


def test_empty_alphabet_rejected():
    with pytest.raises(ValueError):
        build_tree({}, [])


def test_duplicate_symbol_rejected():
    with pytest.raises(ValueError):
        build_tree({"a": 1}, ["a", "b", "a"])


def test_multichar_symbol_rejected():
    with pytest.raises(ValueError):
        build_tree({}, ["a", "bc"])


def test_negative_frequency_rejected():
    with pytest.raises(ValueError):
        build_tree({"a": -1}, ["a", "b"])


def test_sort_key_orders_leaves_before_internals():
    leaf = HuffmanNode(freq=5, sym="z")
    merged = HuffmanNode(freq=5, seq_id=1, left=0, right=1)
    assert leaf.sort_key() < merged.sort_key()
    assert HuffmanNode(freq=4, seq_id=9, left=0, right=1).sort_key() < leaf.sort_key()


def test_tree_is_immutable():
    tree = build_tree({"a": 1}, ["a", "b"])
    with pytest.raises(AttributeError):
        tree.root = 0
    assert isinstance(tree, HuffmanTree)
