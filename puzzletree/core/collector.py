"""Data collection strategies for PuzzleTree.

DataCollectors define what information to extract from nodes during
traversal. The size collector is the heart of the directory aggregation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple
from .node import TreeNode, DirectoryNode, FileNode
from .adapter import TreeAdapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        """Return node metadata."""
        return node.metadata()


class DirectorySizeCollector(DataCollector):
    """Computes aggregated sizes, one node at a time, in post-order.

    A file's size is its stored size; a directory's size is the sum of its
    children's sizes. Children must have been collected before their parent,
    so this collector only works behind a post-order traverser. Every
    directory is recorded in `directory_sizes` right after its size is
    known, which keeps that list in post-order as well.
    """

    def __init__(self, adapter: TreeAdapter):
        super().__init__(adapter)
        self._sizes: Dict[str, int] = {}
        self.directory_sizes: List[Tuple[DirectoryNode, int]] = []

    def collect(self, node: TreeNode, depth: int) -> int:
        node_id = node.identifier()
        if node_id in self._sizes:
            return self._sizes[node_id]

        if isinstance(node, FileNode):
            size = node.size
        elif isinstance(node, DirectoryNode):
            size = 0
            for child in self.adapter.get_children(node):
                child_id = child.identifier()
                if child_id not in self._sizes:
                    raise RuntimeError(
                        f"{child_id} was not collected before its parent {node_id}; "
                        f"DirectorySizeCollector needs post-order traversal"
                    )
                size += self._sizes[child_id]
            self.directory_sizes.append((node, size))
        else:
            raise TypeError(f"Unsupported node type: {type(node).__name__}")

        self._sizes[node_id] = size
        return size

    def size_of(self, node: TreeNode) -> int:
        """Return the aggregated size of an already collected node."""
        return self._sizes[node.identifier()]
