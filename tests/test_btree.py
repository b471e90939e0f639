import random

import pytest

from rtlab.btree import BTree


def check_invariants(tree):
    t = tree.t
    leaf_depths = set()

    def walk(node, depth, lo, hi, is_root):
        n = len(node.keys)
        assert n <= 2 * t - 1
        if not is_root:
            assert n >= t - 1
        assert node.keys == sorted(node.keys)
        for k in node.keys:
            if lo is not None:
                assert k > lo
            if hi is not None:
                assert k < hi
        if node.leaf:
            assert node.children == []
            leaf_depths.add(depth)
        else:
            assert len(node.children) == n + 1
            bounds = [lo] + node.keys + [hi]
            for idx, child in enumerate(node.children):
                walk(child, depth + 1, bounds[idx], bounds[idx + 1], False)

    walk(tree.root, 0, None, None, True)
    assert len(leaf_depths) <= 1
    assert len(tree.keys()) == len(tree)


def test_invalid_degree():
    with pytest.raises(ValueError):
        BTree(1)


def test_format_single_leaf():
    tree = BTree()
    for k in (1, 2, 3):
        tree.insert(k)
    assert tree.format() == "(123)\n"


def test_format_after_root_split():
    tree = BTree()
    for k in (1, 2, 3, 4):
        tree.insert(k)
    assert tree.format() == "|(2)|\n(1)(34)\n"
    check_invariants(tree)


def test_empty_format():
    assert BTree().format() == "()\n"


def test_duplicate_insert_ignored():
    tree = BTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1
    assert tree.keys() == [5]


def test_search_returns_node_with_key():
    tree = BTree(3)
    for k in range(50):
        tree.insert(k)
    node = tree.search(37)
    assert 37 in node.keys
    assert tree.search(100) is None


@pytest.mark.parametrize("t", [2, 3, 4])
def test_random_inserts_keep_invariants(t):
    rng = random.Random(t)
    values = rng.sample(range(1000), 200)
    tree = BTree(t)
    for v in values:
        tree.insert(v)
        check_invariants(tree)
    assert tree.keys() == sorted(values)
    assert all(v in tree for v in values)


@pytest.mark.parametrize("t", [2, 3, 5])
def test_delete_everything(t):
    rng = random.Random(100 + t)
    values = rng.sample(range(500), 150)
    tree = BTree(t)
    for v in values:
        tree.insert(v)
    remaining = set(values)
    rng.shuffle(values)
    for v in values:
        tree.delete(v)
        remaining.discard(v)
        check_invariants(tree)
        assert v not in tree
        assert tree.keys() == sorted(remaining)
    assert len(tree) == 0
    assert tree.format() == BTree(t).format()


def test_delete_missing_raises():
    tree = BTree()
    for k in range(10):
        tree.insert(k)
    with pytest.raises(KeyError):
        tree.delete(42)
    assert len(tree) == 10


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        BTree().delete(1)


def test_reuse_after_emptying():
    tree = BTree()
    tree.insert(1)
    tree.delete(1)
    tree.insert(7)
    assert tree.keys() == [7]
    assert 7 in tree


def test_interleaved_operations():
    rng = random.Random(7)
    tree = BTree(2)
    model = set()
    for _ in range(600):
        v = rng.randrange(80)
        if v in model and rng.random() < 0.5:
            tree.delete(v)
            model.remove(v)
        else:
            assert tree.insert(v) is (v not in model)
            model.add(v)
        check_invariants(tree)
    assert tree.keys() == sorted(model)
    assert list(tree) == sorted(model)