from __future__ import annotations

"""
Unit tests for the concurrent PathTree.

Verifies:
1. Segment splitting and path reconstruction.
2. Directory flag demotion/promotion rules and their order independence.
3. Single creation of nodes under concurrent inserts.
"""

import itertools
import random
import threading
from typing import List

import pytest

from dirtwins.core.analysis.path_tree import PathTree


def _snapshot(tree: PathTree):
    """Structure of the tree as (path, is_directory) pairs, order-free."""
    out = set()
    stack = [tree.root]
    while stack:
        node = stack.pop()
        out.add((tree.path_of(node), node.is_directory))
        stack.extend(tree.children_of(node))
    return out


def test_root_invariants() -> None:
    tree = PathTree()
    assert tree.root.name == ""
    assert tree.root.parent_id is None
    assert tree.root.is_directory is True
    assert len(tree) == 1


def test_insert_creates_intermediate_directories() -> None:
    tree = PathTree()
    leaf = tree.insert("a/b/c.txt")

    assert leaf.name == "c.txt"
    assert leaf.is_directory is False
    assert tree.find("a").is_directory is True
    assert tree.find("a/b").is_directory is True
    assert len(tree) == 4


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a/b/c", "a/b/c"),
        ("/a/b/c", "a/b/c"),
        ("a//b///c", "a/b/c"),
        ("a/b/c/", "a/b/c"),
        ("//a/b//", "a/b"),
    ],
)
def test_path_round_trip(raw: str, expected: str) -> None:
    tree = PathTree()
    node = tree.insert(raw)
    assert tree.path_of(node) == expected
    assert tree.find(raw) is node


def test_trailing_slash_marks_directory() -> None:
    tree = PathTree()
    node = tree.insert("exports/empty/")
    assert node.is_directory is True
    assert node.children == {}


def test_separator_only_paths_leave_root_untouched() -> None:
    tree = PathTree()
    assert tree.insert("") is tree.root
    assert tree.insert("///") is tree.root
    assert tree.root.is_directory is True
    assert len(tree) == 1


def test_insert_is_idempotent() -> None:
    tree = PathTree()
    tree.insert("a/b/c")
    before = _snapshot(tree)
    size = len(tree)

    tree.insert("a/b/c")

    assert len(tree) == size
    assert _snapshot(tree) == before


def test_leaf_is_promoted_when_child_arrives() -> None:
    tree = PathTree()
    x = tree.insert("x")
    assert x.is_directory is False

    tree.insert("x/y")
    assert x.is_directory is True


def test_child_first_then_leaf_keeps_directory() -> None:
    tree = PathTree()
    tree.insert("x/y")
    x = tree.insert("x")
    assert x.is_directory is True


@pytest.mark.parametrize("order", list(itertools.permutations(["x", "x/", "y/z"])))
def test_directory_flag_is_order_independent(order) -> None:
    tree = PathTree()
    for path in order:
        tree.insert(path)
    assert tree.find("x").is_directory is True
    assert tree.find("y").is_directory is True
    assert tree.find("y/z").is_directory is False


def test_is_ancestor() -> None:
    tree = PathTree()
    tree.insert("a/b/c/d")
    a, c = tree.find("a"), tree.find("a/b/c")

    assert tree.is_ancestor(a, c) is True
    assert tree.is_ancestor(c, a) is False
    assert tree.is_ancestor(tree.root, a) is True
    assert tree.is_ancestor(a, a) is False


def test_children_of_is_sorted() -> None:
    tree = PathTree()
    for path in ["p/zeta", "p/alpha", "p/mid"]:
        tree.insert(path)
    names = [n.name for n in tree.children_of(tree.find("p"))]
    assert names == ["alpha", "mid", "zeta"]


def _sample_paths() -> List[str]:
    paths = []
    for i in range(20):
        for j in range(15):
            paths.append(f"shared/dir{i}/file{j}")
            paths.append(f"shared/dir{i}/sub/")
    paths.extend(["shared/dir3", "shared/dir7/sub/leaf"])
    return paths


def test_concurrent_insert_matches_sequential() -> None:
    paths = _sample_paths()

    sequential = PathTree()
    for p in paths:
        sequential.insert(p)

    shuffled = list(paths)
    random.Random(42).shuffle(shuffled)
    concurrent = PathTree()
    count = concurrent.insert_many(shuffled, max_workers=16)

    assert count == len(paths)
    assert len(concurrent) == len(sequential)
    assert _snapshot(concurrent) == _snapshot(sequential)


def test_concurrent_same_child_created_once() -> None:
    """Many threads racing on one new name must share a single node."""
    tree = PathTree()
    barrier = threading.Barrier(8)
    nodes = []

    def worker() -> None:
        barrier.wait()
        nodes.append(tree.insert("race/target/"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({n.node_id for n in nodes}) == 1
    assert len(tree) == 3
    assert list(tree.find("race").children) == ["target"]


def test_get_returns_arena_node() -> None:
    tree = PathTree()
    leaf = tree.insert("a/b")

    assert tree.get(leaf.node_id) is leaf
    assert tree.get(leaf.parent_id) is tree.find("a")
    assert tree.get(0) is tree.root
