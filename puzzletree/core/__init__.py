"""Core abstractions for PuzzleTree.

This module contains the node model, the adapter that navigates it, and
the traversers and collectors that walk it.
"""

from .node import TreeNode, DirectoryNode, FileNode
from .adapter import TreeAdapter, TranscriptTreeAdapter
from .traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .collector import DataCollector, MetadataCollector, DirectorySizeCollector

__all__ = [
    "TreeNode",
    "DirectoryNode",
    "FileNode",
    "TreeAdapter",
    "TranscriptTreeAdapter",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "MetadataCollector",
    "DirectorySizeCollector",
]
