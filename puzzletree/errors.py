"""Exception hierarchy for PuzzleTree.

Every error the library raises on purpose derives from PuzzleError, so the
command line can report them as one-line diagnostics instead of tracebacks.
"""

from typing import Optional, Sequence


def _format_path(path: Sequence[str]) -> str:
    return "/" + "/".join(path)


class PuzzleError(Exception):
    """Base class for all PuzzleTree errors."""
    pass


class TreeConstructionError(PuzzleError):
    """Raised when a transcript cannot be turned into a tree."""
    pass


class UnknownChildDirectoryError(TreeConstructionError):
    """Raised when `$ cd <name>` names a directory that was never listed.

    Attributes:
        name: The directory name the transcript tried to enter
        path: Path segments of the directory the cursor was in
        line_number: 1-based transcript line of the offending command
    """

    def __init__(self, name: str, path: Sequence[str], line_number: Optional[int] = None):
        self.name = name
        self.path = tuple(path)
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Unknown directory {name!r} under {_format_path(self.path)}{location}"
        )


class StackUnderflowError(TreeConstructionError):
    """Raised when `$ cd ..` is issued while already at the root."""

    def __init__(self, line_number: Optional[int] = None):
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Cannot move above the root directory{location}")


class NoQualifyingDirectoryError(PuzzleError):
    """Raised when no single directory frees enough space when deleted."""

    def __init__(self, free: int, needed: int):
        self.free = free
        self.needed = needed
        super().__init__(
            f"No directory frees enough space: {free} free, {needed} needed"
        )


class MalformedPacketError(PuzzleError):
    """Raised when a packet line is not a valid nested list."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed packet on line {line_number}: {line!r}")


class ConfigurationError(PuzzleError):
    """Raised when a SolverConfig fails validation."""
    pass
