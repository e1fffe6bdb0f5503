"""TreeAdapter abstraction for PuzzleTree.

The TreeAdapter provides the navigation logic for a tree structure,
decoupling the node representation from the traversal mechanism.
"""

from abc import ABC, abstractmethod
from typing import Iterator
from .node import TreeNode, DirectoryNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific type of tree structure.

    While TreeNode is just a data container, the adapter knows HOW to
    navigate the tree, so traversers and collectors never touch node
    internals directly.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass


class TranscriptTreeAdapter(TreeAdapter):
    """Adapter for trees rebuilt from a shell transcript.

    Only downward navigation is offered. Nodes keep no parent
    back-reference; the builder's path stack is the only upward link.
    """

    def __init__(self, root: DirectoryNode):
        self.root = root

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Yield children in first-listing order."""
        if isinstance(node, DirectoryNode):
            yield from node.iter_children()
