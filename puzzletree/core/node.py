"""TreeNode abstraction for PuzzleTree.

The TreeNode is intentionally kept simple - it's primarily a data container.
Navigation logic is delegated to the TreeAdapter. The two concrete variants,
DirectoryNode and FileNode, model the tree rebuilt from a shell transcript.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Tuple


class TreeNode(ABC):
    """Abstract base class for nodes in a transcript tree.

    Nodes are identified by their absolute path, which is unique within a
    tree because a directory never holds two children with the same name.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        Returns:
            str: Absolute path of the node ("/", "/a", "/a/e/i")
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node can never have children.

        Returns:
            bool: True for files, False for directories (even empty ones)
        """
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return basic metadata about this node.

        Common metadata fields:
        - name: Display name of the node
        - type: "dir" or "file"
        - path: Absolute path, same as identifier()
        - size: Size in bytes (files only)

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self.identifier()!r})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        """Hash based on identifier for use in sets and dicts."""
        return hash(self.identifier())


def _escape_segment(segment: str) -> str:
    return segment.replace("\\", "\\\\").replace("/", "\\/")


def path_identifier(path: Tuple[str, ...]) -> str:
    """Join path segments into an absolute path string.

    Backslashes and slashes inside a segment are escaped, so a directory
    named "a/b" and a directory "b" inside "a" never share an identifier.
    """
    return "/" + "/".join(_escape_segment(segment) for segment in path)


class _PathNode(TreeNode):
    """Shared storage for nodes that know their own path segments."""

    def __init__(self, name: str, path: Tuple[str, ...]):
        self.name = name
        self.path = tuple(path)
        self._identifier = path_identifier(self.path)

    def identifier(self) -> str:
        return self._identifier


class FileNode(_PathNode):
    """Leaf node holding a file size in bytes."""

    def __init__(self, name: str, size: int, path: Tuple[str, ...]):
        if size < 0:
            raise ValueError(f"File size cannot be negative: {size}")
        super().__init__(name, path)
        self.size = size

    def is_leaf(self) -> bool:
        return True

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': 'file',
            'path': self.identifier(),
            'size': self.size,
        }


class DirectoryNode(_PathNode):
    """Directory node with an ordered set of uniquely named children.

    Children keep first-listing order. The directory has no size field of
    its own; its size is always derived by aggregation.
    """

    ROOT_NAME = "/"

    def __init__(self, name: str = ROOT_NAME, path: Tuple[str, ...] = ()):
        super().__init__(name, path)
        self._children: List[TreeNode] = []
        self._by_name: Dict[str, TreeNode] = {}

    @classmethod
    def root(cls) -> 'DirectoryNode':
        """Create an empty root directory."""
        return cls(cls.ROOT_NAME, ())

    def is_root(self) -> bool:
        return not self.path

    def is_leaf(self) -> bool:
        return False

    @property
    def children(self) -> Tuple[TreeNode, ...]:
        return tuple(self._children)

    def iter_children(self) -> Iterator[TreeNode]:
        return iter(self._children)

    def has_children(self) -> bool:
        return bool(self._children)

    def child(self, name: str) -> Optional[TreeNode]:
        """Look up an immediate child by name."""
        return self._by_name.get(name)

    def child_path(self, name: str) -> Tuple[str, ...]:
        """Path segments a child called `name` would have."""
        return self.path + (name,)

    def add_child(self, node: TreeNode) -> TreeNode:
        """Append a child unless one with the same name already exists.

        Returns:
            The child now registered under that name (existing or new)
        """
        existing = self._by_name.get(node.name)
        if existing is not None:
            return existing
        self._children.append(node)
        self._by_name[node.name] = node
        return node

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': 'dir',
            'path': self.identifier(),
            'child_count': len(self._children),
        }
