"""Query evaluators over aggregated directory sizes.

Both queries are plain reducers over the (directory, size) pairs produced
by `collect_directory_sizes`; they never look at the tree itself.
"""

import logging
from typing import Sequence, Tuple

from .core.node import DirectoryNode
from .errors import NoQualifyingDirectoryError

logger = logging.getLogger(__name__)

DirectorySize = Tuple[DirectoryNode, int]

SMALL_DIRECTORY_THRESHOLD = 100_000
DISK_CAPACITY = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000


def bounded_sum(sizes: Sequence[DirectorySize],
                threshold: int = SMALL_DIRECTORY_THRESHOLD) -> int:
    """Sum every directory size strictly below `threshold`.

    A directory whose size equals the threshold is excluded. Nested
    directories are counted on their own as well as inside their parent.
    """
    return sum(size for _, size in sizes if size < threshold)


def smallest_sufficient_directory(sizes: Sequence[DirectorySize],
                                  total: int = DISK_CAPACITY,
                                  needed: int = REQUIRED_FREE_SPACE) -> DirectorySize:
    """Find the smallest directory whose deletion frees enough space.

    Used space is the largest aggregated size, which is the root's. The
    pairs are scanned smallest first, so the first one that satisfies
    `free + size >= needed` is the minimal one.

    Args:
        sizes: (directory, size) pairs, in any order
        total: Disk capacity
        needed: Free space required after the deletion

    Returns:
        The (directory, size) pair to delete

    Raises:
        NoQualifyingDirectoryError: If no directory is large enough
    """
    if not sizes:
        raise NoQualifyingDirectoryError(total, needed)

    used = max(size for _, size in sizes)
    free = total - used
    logger.debug("Disk usage: %d used, %d free, %d needed", used, free, needed)

    for directory, size in sorted(sizes, key=lambda pair: pair[1]):
        if free + size >= needed:
            return directory, size

    raise NoQualifyingDirectoryError(free, needed)
