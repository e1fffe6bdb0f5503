"""Tests for directory size aggregation.

The aggregator must visit every directory exactly once, in post-order, and
each size must equal the sum of its direct files plus its direct
subdirectories' sizes.
"""

import random

import pytest

from puzzletree import build_tree, collect_directory_sizes
from puzzletree.core import (
    DirectoryNode,
    FileNode,
    TranscriptTreeAdapter,
    DirectorySizeCollector,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)


def make_random_tree(seed: int, max_depth: int = 4) -> DirectoryNode:
    """Build a random tree directly from nodes."""
    rng = random.Random(seed)
    root = DirectoryNode.root()

    def populate(directory: DirectoryNode, depth: int) -> None:
        for i in range(rng.randint(0, 4)):
            name = f"f{i}"
            directory.add_child(FileNode(name, rng.randint(0, 50_000), directory.child_path(name)))
        if depth < max_depth:
            for i in range(rng.randint(0, 3)):
                name = f"d{i}"
                sub = directory.add_child(DirectoryNode(name, directory.child_path(name)))
                populate(sub, depth + 1)

    populate(root, 0)
    return root


def all_directories(root: DirectoryNode):
    adapter = TranscriptTreeAdapter(root)
    return [node for node, _ in DepthFirstPreOrderTraverser(adapter).traverse(root)
            if isinstance(node, DirectoryNode)]


def independent_size(directory: DirectoryNode) -> int:
    total = 0
    for child in directory.children:
        if isinstance(child, FileNode):
            total += child.size
        else:
            total += independent_size(child)
    return total


def test_example_sizes(transcript_lines):
    sizes = collect_directory_sizes(build_tree(transcript_lines))
    by_path = {node.identifier(): size for node, size in sizes}

    assert by_path == {
        "/a/e": 584,
        "/a": 94853,
        "/d": 24933642,
        "/": 48381165,
    }


def test_example_is_post_order(transcript_lines):
    sizes = collect_directory_sizes(build_tree(transcript_lines))
    assert [node.identifier() for node, _ in sizes] == ["/a/e", "/a", "/d", "/"]


@pytest.mark.parametrize("seed", range(10))
def test_every_directory_exactly_once(seed):
    root = make_random_tree(seed)
    sizes = collect_directory_sizes(root)

    ids = [node.identifier() for node, _ in sizes]
    assert len(ids) == len(set(ids))
    assert sorted(ids) == sorted(d.identifier() for d in all_directories(root))


@pytest.mark.parametrize("seed", range(10))
def test_descendants_come_first(seed):
    sizes = collect_directory_sizes(make_random_tree(seed))
    position = {node.identifier(): i for i, (node, _) in enumerate(sizes)}

    for node, _ in sizes:
        for child in node.children:
            if isinstance(child, DirectoryNode):
                assert position[child.identifier()] < position[node.identifier()]


@pytest.mark.parametrize("seed", range(10))
def test_size_consistency(seed):
    sizes = collect_directory_sizes(make_random_tree(seed))
    aggregated = {node.identifier(): size for node, size in sizes}

    for node, size in sizes:
        direct_files = sum(c.size for c in node.children if isinstance(c, FileNode))
        direct_dirs = sum(aggregated[c.identifier()] for c in node.children
                          if isinstance(c, DirectoryNode))
        assert size == direct_files + direct_dirs
        assert size == independent_size(node)


@pytest.mark.parametrize("seed", range(10))
def test_root_dominance(seed):
    root = make_random_tree(seed)
    sizes = collect_directory_sizes(root)

    root_size = dict((n.identifier(), s) for n, s in sizes)["/"]
    assert root_size == max(s for _, s in sizes)
    assert sizes[-1][0] is root


def test_empty_tree():
    root = DirectoryNode.root()
    assert collect_directory_sizes(root) == [(root, 0)]


def test_collector_requires_post_order():
    root = DirectoryNode.root()
    sub = root.add_child(DirectoryNode("a", ("a",)))
    sub.add_child(FileNode("x", 10, ("a", "x")))

    adapter = TranscriptTreeAdapter(root)
    collector = DirectorySizeCollector(adapter)
    with pytest.raises(RuntimeError, match="post-order"):
        for node, depth in DepthFirstPreOrderTraverser(adapter).traverse(root):
            collector.collect(node, depth)


def test_collector_size_of(transcript_lines):
    root = build_tree(transcript_lines)
    adapter = TranscriptTreeAdapter(root)
    collector = DirectorySizeCollector(adapter)
    for node, depth in DepthFirstPostOrderTraverser(adapter).traverse(root):
        collector.collect(node, depth)

    assert collector.size_of(root.child("d")) == 24933642
    assert collector.size_of(root.child("b.txt")) == 14848514


class TestTraversers:
    """Traversal order and the adapter's navigation helpers."""

    def test_pre_order_visits_parent_first(self, transcript_lines):
        root = build_tree(transcript_lines)
        adapter = TranscriptTreeAdapter(root)
        order = [n.identifier() for n, _ in create_traverser("dfs_pre", adapter).traverse(root)]
        assert order[:3] == ["/", "/a", "/a/e"]

    def test_max_depth_limits_exploration(self, transcript_lines):
        root = build_tree(transcript_lines)
        adapter = TranscriptTreeAdapter(root)
        nodes = list(DepthFirstPostOrderTraverser(adapter).traverse(root, max_depth=1))
        assert max(depth for _, depth in nodes) == 1
        assert len(nodes) == 5

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            create_traverser("bfs", TranscriptTreeAdapter(DirectoryNode.root()))

    def test_pre_order_keeps_listing_order(self, transcript_lines):
        root = build_tree(transcript_lines)
        adapter = TranscriptTreeAdapter(root)
        names = [n.name for n, depth in DepthFirstPreOrderTraverser(adapter).traverse(root)
                 if depth == 1]
        assert names == ["a", "b.txt", "c.dat", "d"]


def test_slash_in_name_does_not_collide():
    lines = [
        "$ cd /", "$ ls", "dir a", "dir a/b",
        "$ cd a", "$ ls", "dir b", "$ cd b", "$ ls", "100 x",
        "$ cd /", "$ cd a/b", "$ ls", "5 y",
    ]
    root = build_tree(lines)
    sizes = collect_directory_sizes(root)

    assert len(sizes) == 4
    assert sizes[-1] == (root, 105)

    by_node = {id(node): size for node, size in sizes}
    assert by_node[id(root.child("a"))] == 100
    assert by_node[id(root.child("a").child("b"))] == 100
    assert by_node[id(root.child("a/b"))] == 5
    assert root.child("a/b").identifier() != root.child("a").child("b").identifier()


def test_deep_chain_does_not_hit_recursion_limit():
    depth = 2000
    lines = ["$ cd /"]
    for _ in range(depth):
        lines += ["$ ls", "dir d", "$ cd d"]
    lines += ["$ ls", "1 f"]

    sizes = collect_directory_sizes(build_tree(lines))

    assert len(sizes) == depth + 1
    assert all(size == 1 for _, size in sizes)
    assert sizes[0][0].path == ("d",) * depth
    assert sizes[-1][0].is_root()


def test_deep_chain_pre_order():
    depth = 2000
    root = DirectoryNode.root()
    current = root
    for _ in range(depth):
        current = current.add_child(DirectoryNode("d", current.child_path("d")))

    adapter = TranscriptTreeAdapter(root)
    depths = [d for _, d in DepthFirstPreOrderTraverser(adapter).traverse(root)]
    assert depths == list(range(depth + 1))
