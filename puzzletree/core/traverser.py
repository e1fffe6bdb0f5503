"""Tree traversal strategies for PuzzleTree.

Traversers implement different algorithms for walking through trees.
They work with any TreeAdapter, making them independent of the node types.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Set, Tuple
from .node import TreeNode
from .adapter import TreeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Used for rendering the tree as an
    indented listing. Uses an explicit stack, so tree depth is not bounded
    by the interpreter's recursion limit.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        visited: Set[str] = set()
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            node_id = node.identifier()
            if node_id in visited:
                continue
            visited.add(node_id)

            yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = list(self.adapter.get_children(node))
                # Reversed so the first child is popped first
                stack.extend((child, depth + 1) for child in reversed(children))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent, so every subtree is complete by the
    time its root is yielded. This is what directory size aggregation
    relies on. Each stack frame keeps the iterator over its node's
    remaining children.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        visited: Set[str] = {root.identifier()}
        stack: List[Tuple[TreeNode, int, Iterator[TreeNode]]] = [
            (root, 0, self._children_to_explore(root, 0, max_depth))
        ]

        while stack:
            node, depth, children = stack[-1]
            child = next(children, None)

            if child is None:
                # All children done, yield parent (post-order)
                stack.pop()
                yield (node, depth)
                continue

            child_id = child.identifier()
            if child_id in visited:
                continue
            visited.add(child_id)
            stack.append(
                (child, depth + 1, self._children_to_explore(child, depth + 1, max_depth))
            )

    def _children_to_explore(self,
                             node: TreeNode,
                             depth: int,
                             max_depth: Optional[int]) -> Iterator[TreeNode]:
        if self._should_explore(depth, max_depth) and not node.is_leaf():
            return iter(self.adapter.get_children(node))
        return iter(())


def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs_pre, dfs_post)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
