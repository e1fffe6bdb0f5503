"""Transcript parser.

Turns the lines of a shell transcript into a stream of structural events.
The parser is tolerant: blank lines and lines it does not recognise are
skipped, never fatal. Deciding whether an event makes sense for the tree
is the builder's job.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

logger = logging.getLogger(__name__)

PROMPT = "$"
CD_ROOT = "$ cd /"
CD_PARENT = "$ cd .."
CD_PREFIX = "$ cd "
LS = "$ ls"
DIR_PREFIX = "dir "


@dataclass(frozen=True)
class GotoRoot:
    line_number: int = 0


@dataclass(frozen=True)
class GotoParent:
    line_number: int = 0


@dataclass(frozen=True)
class GotoChild:
    name: str
    line_number: int = 0


@dataclass(frozen=True)
class ListDirectory:
    """Start of an `$ ls` block; declarations that follow belong to it."""
    line_number: int = 0


@dataclass(frozen=True)
class DeclareDir:
    name: str
    line_number: int = 0


@dataclass(frozen=True)
class DeclareFile:
    name: str
    size: int
    line_number: int = 0


TranscriptEvent = Union[GotoRoot, GotoParent, GotoChild, ListDirectory, DeclareDir, DeclareFile]


def parse_command(line: str, line_number: int = 0) -> Optional[TranscriptEvent]:
    """Parse a `$ ...` prompt line.

    Returns:
        The matching event, or None for commands that are not understood
    """
    if line == CD_ROOT:
        return GotoRoot(line_number)
    if line == CD_PARENT:
        return GotoParent(line_number)
    if line.startswith(CD_PREFIX):
        name = line[len(CD_PREFIX):]
        if name:
            return GotoChild(name, line_number)
        return None
    if line == LS:
        return ListDirectory(line_number)
    return None


def parse_listing_entry(line: str, line_number: int = 0) -> Optional[TranscriptEvent]:
    """Parse one line of `$ ls` output.

    `dir <name>` declares a directory, `<size> <name>` declares a file.
    The line is split on its first space only, so the name is kept verbatim.
    Sizes must be plain ASCII digits.

    Returns:
        The matching event, or None if the line is malformed
    """
    if line.startswith(DIR_PREFIX):
        name = line[len(DIR_PREFIX):]
        return DeclareDir(name, line_number) if name else None

    size_text, sep, name = line.partition(" ")
    if not sep or not name or not (size_text.isascii() and size_text.isdecimal()):
        return None
    return DeclareFile(name, int(size_text), line_number)


def parse_transcript(lines: Iterable[str]) -> Iterator[TranscriptEvent]:
    """Parse a transcript into events.

    Args:
        lines: Transcript lines, with or without trailing newlines

    Yields:
        TranscriptEvent instances in transcript order
    """
    in_listing = False

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        if line.startswith(PROMPT):
            event = parse_command(line, line_number)
            in_listing = isinstance(event, ListDirectory)
        elif in_listing:
            event = parse_listing_entry(line, line_number)
        else:
            event = None

        if event is None:
            logger.debug("Ignoring malformed line %d: %r", line_number, line)
            continue

        yield event
