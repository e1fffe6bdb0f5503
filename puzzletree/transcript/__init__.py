"""Shell transcript parsing and tree construction."""

from .parser import (
    TranscriptEvent,
    GotoRoot,
    GotoParent,
    GotoChild,
    ListDirectory,
    DeclareDir,
    DeclareFile,
    parse_transcript,
)
from .builder import TreeBuilder

__all__ = [
    "TranscriptEvent",
    "GotoRoot",
    "GotoParent",
    "GotoChild",
    "ListDirectory",
    "DeclareDir",
    "DeclareFile",
    "parse_transcript",
    "TreeBuilder",
]
