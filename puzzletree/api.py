"""High-level API for PuzzleTree.

This module provides simple, functional interfaces for the common cases:
build a tree from a transcript, aggregate its directory sizes and answer
both puzzles. These functions wrap the object-oriented core for ease of use.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

from .config import SolverConfig
from .core.node import DirectoryNode
from .core.adapter import TranscriptTreeAdapter
from .core.traverser import create_traverser
from .core.collector import DirectorySizeCollector, MetadataCollector
from .transcript.parser import parse_transcript
from .transcript.builder import TreeBuilder
from .queries import bounded_sum, smallest_sufficient_directory
from .packets import parse_packets, ordered_pair_index_sum, decoder_key

logger = logging.getLogger(__name__)


class PuzzleAnswer(NamedTuple):
    """The two answers every puzzle produces."""
    part1: int
    part2: int


def read_lines(path: Union[str, Path]) -> List[str]:
    """Read a whole input file into memory as a list of lines.

    Args:
        path: Input file path

    Returns:
        Lines without their line terminators
    """
    return Path(path).read_text(encoding="utf-8").splitlines()


def build_tree(lines: Iterable[str]) -> DirectoryNode:
    """Rebuild the directory tree described by a shell transcript.

    Args:
        lines: Transcript lines

    Returns:
        The root directory

    Raises:
        UnknownChildDirectoryError: If the transcript enters an unlisted directory
        StackUnderflowError: If the transcript moves above the root

    Example:
        >>> root = build_tree(["$ cd /", "$ ls", "dir a", "14848514 b.txt"])
        >>> [child.name for child in root.children]
        ['a', 'b.txt']
    """
    root = TreeBuilder().build(parse_transcript(lines))
    logger.info("Built tree with %d top-level entries", len(root.children))
    return root


def collect_directory_sizes(root: DirectoryNode) -> List[Tuple[DirectoryNode, int]]:
    """Aggregate the size of every directory, children before parents.

    Args:
        root: Root of the tree to aggregate

    Returns:
        One (directory, size) pair per directory, in post-order
    """
    adapter = TranscriptTreeAdapter(root)
    traverser = create_traverser("dfs_post", adapter)
    collector = DirectorySizeCollector(adapter)

    for node, depth in traverser.traverse(root):
        collector.collect(node, depth)

    logger.info("Aggregated %d directories", len(collector.directory_sizes))
    return collector.directory_sizes


def solve_tree(root: DirectoryNode,
               config: Optional[SolverConfig] = None) -> PuzzleAnswer:
    """Answer both filesystem queries for an already built tree.

    Part 1 is the sum of all directory sizes below the small-directory
    threshold. Part 2 is the size of the smallest directory whose deletion
    leaves enough free space.

    Raises:
        NoQualifyingDirectoryError: If no directory is large enough for part 2
    """
    config = (config or SolverConfig()).ensure_valid()
    fs = config.filesystem

    sizes = collect_directory_sizes(root)
    part1 = bounded_sum(sizes, fs.small_directory_threshold)
    directory, part2 = smallest_sufficient_directory(
        sizes, fs.disk_capacity, fs.required_free_space
    )
    logger.info("Deleting %s frees %d", directory.identifier(), part2)
    return PuzzleAnswer(part1, part2)


def solve_filesystem(lines: Iterable[str],
                     config: Optional[SolverConfig] = None) -> PuzzleAnswer:
    """Rebuild the tree from a transcript and answer both filesystem queries.

    Example:
        >>> solve_filesystem(["$ cd /", "$ ls", "100 a"])
        PuzzleAnswer(part1=100, part2=100)
    """
    return solve_tree(build_tree(lines), config)


def solve_packets(lines: Iterable[str],
                  config: Optional[SolverConfig] = None) -> PuzzleAnswer:
    """Answer both packet ordering questions.

    Raises:
        MalformedPacketError: If a line is not a valid packet
    """
    config = (config or SolverConfig()).ensure_valid()

    packets = parse_packets(lines)
    logger.info("Parsed %d packets", len(packets))
    return PuzzleAnswer(
        ordered_pair_index_sum(packets),
        decoder_key(packets, config.packets.dividers),
    )


def render_tree(root: DirectoryNode) -> List[str]:
    """Render the tree as an indented listing.

    Example:
        - / (dir)
          - a (dir)
            - i (file, size=584)
    """
    adapter = TranscriptTreeAdapter(root)
    traverser = create_traverser("dfs_pre", adapter)
    collector = MetadataCollector(adapter)

    lines = []
    for node, depth in traverser.traverse(root):
        meta = collector.collect(node, depth)
        indent = "  " * depth
        if meta['type'] == 'dir':
            lines.append(f"{indent}- {meta['name']} (dir)")
        else:
            lines.append(f"{indent}- {meta['name']} (file, size={meta['size']})")
    return lines


def get_tree_stats(root: DirectoryNode) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with directory/file counts, total size and max depth

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Directories: {stats['directories']}")
    """
    stats = {
        'directories': 0,
        'files': 0,
        'total_size': 0,
        'max_depth': 0,
    }

    adapter = TranscriptTreeAdapter(root)
    for node, depth in create_traverser("dfs_pre", adapter).traverse(root):
        meta = node.metadata()
        if meta['type'] == 'dir':
            stats['directories'] += 1
        else:
            stats['files'] += 1
            stats['total_size'] += meta['size']
        stats['max_depth'] = max(stats['max_depth'], depth)

    return stats
