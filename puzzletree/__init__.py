"""PuzzleTree - line-oriented puzzle solvers built on a small tree library.

PuzzleTree rebuilds a directory tree from a shell transcript, aggregates
directory sizes bottom-up and answers size queries over the result. It also
ships a recursive packet comparator for nested-list puzzles.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Library:
    from puzzletree import solve_filesystem, read_lines

Command line:
    python -m puzzletree fs input
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .api import (
    PuzzleAnswer,
    read_lines,
    build_tree,
    collect_directory_sizes,
    solve_tree,
    solve_filesystem,
    solve_packets,
    render_tree,
    get_tree_stats,
)
from .config import SolverConfig, FilesystemConfig, PacketConfig
from .errors import (
    PuzzleError,
    TreeConstructionError,
    UnknownChildDirectoryError,
    StackUnderflowError,
    NoQualifyingDirectoryError,
    MalformedPacketError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    # API
    "PuzzleAnswer",
    "read_lines",
    "build_tree",
    "collect_directory_sizes",
    "solve_tree",
    "solve_filesystem",
    "solve_packets",
    "render_tree",
    "get_tree_stats",
    # Config
    "SolverConfig",
    "FilesystemConfig",
    "PacketConfig",
    # Errors
    "PuzzleError",
    "TreeConstructionError",
    "UnknownChildDirectoryError",
    "StackUnderflowError",
    "NoQualifyingDirectoryError",
    "MalformedPacketError",
    "ConfigurationError",
]
