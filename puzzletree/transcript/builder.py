"""Tree builder.

Consumes transcript events and materialises the directory tree. The builder
keeps a cursor on the current directory and an explicit path stack, which is
the only record of ancestry; nodes themselves never point at their parent.
"""

import logging
from typing import Iterable, List, Tuple

from ..core.node import DirectoryNode, FileNode
from ..errors import UnknownChildDirectoryError, StackUnderflowError
from .parser import (
    TranscriptEvent,
    GotoRoot,
    GotoParent,
    GotoChild,
    ListDirectory,
    DeclareDir,
    DeclareFile,
)

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Incrementally builds a DirectoryNode tree from transcript events.

    A listing is only taken into account when the directory it describes
    has no children yet, so re-listing a directory never duplicates entries.
    Declarations are also idempotent per name.

    Example:
        >>> builder = TreeBuilder()
        >>> root = builder.build(parse_transcript(lines))
    """

    def __init__(self):
        self.root = DirectoryNode.root()
        self.current = self.root
        self.stack: List[DirectoryNode] = [self.root]
        self._accepting_listing = False
        self._ignored_listings = 0

    @property
    def current_path(self) -> Tuple[str, ...]:
        return self.current.path

    def apply(self, event: TranscriptEvent) -> None:
        """Apply a single event to the tree under construction.

        Raises:
            UnknownChildDirectoryError: `cd` into a name that was never listed
            StackUnderflowError: `cd ..` while at the root
        """
        if isinstance(event, GotoRoot):
            self._goto_root()
        elif isinstance(event, GotoParent):
            self._goto_parent(event)
        elif isinstance(event, GotoChild):
            self._goto_child(event)
        elif isinstance(event, ListDirectory):
            self._start_listing(event)
        elif isinstance(event, DeclareDir):
            if self._accepting_listing:
                self.current.add_child(
                    DirectoryNode(event.name, self.current.child_path(event.name))
                )
        elif isinstance(event, DeclareFile):
            if self._accepting_listing:
                self.current.add_child(
                    FileNode(event.name, event.size, self.current.child_path(event.name))
                )
        else:
            raise TypeError(f"Unsupported transcript event: {event!r}")

    def build(self, events: Iterable[TranscriptEvent]) -> DirectoryNode:
        """Apply every event and return the finished root."""
        for event in events:
            self.apply(event)

        if self._ignored_listings:
            logger.debug("Ignored %d repeated listing(s)", self._ignored_listings)
        return self.root

    def _goto_root(self) -> None:
        self.current = self.root
        self.stack = [self.root]
        self._accepting_listing = False

    def _goto_parent(self, event: GotoParent) -> None:
        if len(self.stack) <= 1:
            raise StackUnderflowError(event.line_number)
        self.stack.pop()
        self.current = self.stack[-1]
        self._accepting_listing = False

    def _goto_child(self, event: GotoChild) -> None:
        child = self.current.child(event.name)
        if not isinstance(child, DirectoryNode):
            raise UnknownChildDirectoryError(event.name, self.current.path, event.line_number)
        self.stack.append(child)
        self.current = child
        self._accepting_listing = False

    def _start_listing(self, event: ListDirectory) -> None:
        self._accepting_listing = not self.current.has_children()
        if not self._accepting_listing:
            self._ignored_listings += 1
            logger.debug(
                "Directory %s already listed, ignoring listing on line %d",
                self.current.identifier(), event.line_number
            )
