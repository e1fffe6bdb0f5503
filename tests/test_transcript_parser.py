"""Tests for the transcript parser.

Covers every recognised line shape, listing-block boundaries and the
tolerant handling of blank and malformed lines.
"""

import logging

import pytest

from puzzletree.transcript.parser import (
    GotoRoot,
    GotoParent,
    GotoChild,
    ListDirectory,
    DeclareDir,
    DeclareFile,
    parse_command,
    parse_listing_entry,
    parse_transcript,
)


class TestLineShapes:
    """Each recognised line maps to exactly one event."""

    @pytest.mark.parametrize("line,expected", [
        ("$ cd /", GotoRoot(1)),
        ("$ cd ..", GotoParent(1)),
        ("$ cd a", GotoChild("a", 1)),
        ("$ cd my dir", GotoChild("my dir", 1)),
        ("$ ls", ListDirectory(1)),
    ])
    def test_commands(self, line, expected):
        assert parse_command(line, 1) == expected

    @pytest.mark.parametrize("line", ["$ pwd", "$ cd ", "$", "$ lsx"])
    def test_unknown_commands(self, line):
        assert parse_command(line, 1) is None

    def test_directory_entry(self):
        assert parse_listing_entry("dir e", 3) == DeclareDir("e", 3)

    def test_file_entry_splits_on_first_space_only(self):
        event = parse_listing_entry("584 my file.txt", 4)
        assert event == DeclareFile("my file.txt", 584, 4)

    @pytest.mark.parametrize("line", ["abc def", "584", "-5 neg", "12.5 x", "dir ",
                                      "\u0663 x", "\uff11\uff12 x"])
    def test_malformed_entries(self, line):
        assert parse_listing_entry(line) is None


def test_listing_block_ends_at_next_prompt():
    lines = ["$ ls", "dir a", "10 b", "$ cd a", "20 c"]
    events = list(parse_transcript(lines))

    assert events == [
        ListDirectory(1),
        DeclareDir("a", 2),
        DeclareFile("b", 10, 3),
        GotoChild("a", 4),
    ]


def test_entries_outside_listing_are_ignored():
    events = list(parse_transcript(["$ cd /", "100 stray", "dir stray"]))
    assert events == [GotoRoot(1)]


def test_unknown_command_ends_listing():
    events = list(parse_transcript(["$ ls", "1 a", "$ pwd", "2 b"]))
    assert events == [ListDirectory(1), DeclareFile("a", 1, 2)]


def test_blank_lines_are_skipped_and_parsing_advances():
    lines = ["", "$ cd /", "   ", "$ ls", "", "dir a", "\n", "5 f"]
    events = list(parse_transcript(lines))

    assert events == [
        GotoRoot(2),
        ListDirectory(4),
        DeclareDir("a", 6),
        DeclareFile("f", 5, 8),
    ]


def test_line_terminators_are_stripped():
    events = list(parse_transcript(["$ cd /\r\n", "$ ls\n", "7 x\r\n"]))
    assert events == [GotoRoot(1), ListDirectory(2), DeclareFile("x", 7, 3)]


def test_malformed_lines_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="puzzletree.transcript.parser"):
        events = list(parse_transcript(["$ ls", "garbage here"]))

    assert events == [ListDirectory(1)]
    assert "Ignoring malformed line 2" in caplog.text


def test_empty_transcript():
    assert list(parse_transcript([])) == []


def test_example_transcript_event_counts(transcript_lines):
    events = list(parse_transcript(transcript_lines))

    assert sum(isinstance(e, DeclareFile) for e in events) == 10
    assert sum(isinstance(e, DeclareDir) for e in events) == 3
    assert sum(isinstance(e, ListDirectory) for e in events) == 4
    assert sum(isinstance(e, GotoParent) for e in events) == 2
