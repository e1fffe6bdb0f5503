"""Shared fixtures for the PuzzleTree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


EXAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""

EXAMPLE_PACKETS = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


@pytest.fixture
def transcript_lines():
    """The standard 23-line example transcript."""
    return EXAMPLE_TRANSCRIPT.splitlines()


@pytest.fixture
def packet_lines():
    """The standard eight-pair packet example."""
    return EXAMPLE_PACKETS.splitlines()


@pytest.fixture
def transcript_file(tmp_path):
    path = tmp_path / "input"
    path.write_text(EXAMPLE_TRANSCRIPT)
    return path


@pytest.fixture
def packet_file(tmp_path):
    path = tmp_path / "packets.txt"
    path.write_text(EXAMPLE_PACKETS)
    return path
