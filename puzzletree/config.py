"""Configuration system for PuzzleTree.

This module defines the knobs of both solvers: the size thresholds used by
the filesystem queries, the divider packets of the packet puzzle and the
default input location.
"""

from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .errors import ConfigurationError
from .packets import DIVIDER_PACKETS
from .queries import (
    SMALL_DIRECTORY_THRESHOLD,
    DISK_CAPACITY,
    REQUIRED_FREE_SPACE,
)


DEFAULT_INPUT_PATH = "input"


@dataclass
class FilesystemConfig:
    """Constants for the directory size queries."""

    small_directory_threshold: int = SMALL_DIRECTORY_THRESHOLD  # Query A, exclusive upper bound
    disk_capacity: int = DISK_CAPACITY  # Query B, total disk size
    required_free_space: int = REQUIRED_FREE_SPACE  # Query B, space the update needs


@dataclass
class PacketConfig:
    """Constants for the packet ordering puzzle."""

    dividers: Tuple[Any, ...] = DIVIDER_PACKETS


@dataclass
class SolverConfig:
    """Complete configuration for a solver run.

    The command line builds one of these from its arguments; library users
    can pass their own to any of the solve_* functions.
    """

    input_path: str = DEFAULT_INPUT_PATH
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    packets: PacketConfig = field(default_factory=PacketConfig)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        fs = self.filesystem
        if fs.small_directory_threshold < 0:
            errors.append("small_directory_threshold cannot be negative")

        if fs.disk_capacity <= 0:
            errors.append("disk_capacity must be positive")

        if fs.required_free_space < 0:
            errors.append("required_free_space cannot be negative")
        elif fs.required_free_space > fs.disk_capacity:
            errors.append("required_free_space cannot exceed disk_capacity")

        if not self.packets.dividers:
            errors.append("at least one divider packet is required")

        return errors

    def ensure_valid(self) -> 'SolverConfig':
        """Raise ConfigurationError if validate() reports anything."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
        return self
