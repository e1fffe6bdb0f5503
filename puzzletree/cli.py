"""Command line interface for PuzzleTree.

Usage:
    python -m puzzletree                  # filesystem puzzle on ./input
    python -m puzzletree fs [PATH] --tree # also print the rebuilt tree
    python -m puzzletree packets [PATH]   # packet ordering puzzle
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .api import read_lines, build_tree, render_tree, solve_tree, solve_packets
from .config import DEFAULT_INPUT_PATH, SolverConfig
from .errors import PuzzleError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s | %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries the answers."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser."""
    parser = argparse.ArgumentParser(
        prog="puzzletree",
        description="Solve the filesystem transcript and packet ordering puzzles",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")
    parser.set_defaults(command="fs", input=DEFAULT_INPUT_PATH, tree=False)

    fs_parser = subparsers.add_parser("fs", help="Directory sizes from a shell transcript")
    fs_parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Transcript file (default: {DEFAULT_INPUT_PATH})",
    )
    fs_parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the rebuilt directory tree before the answers",
    )

    packets_parser = subparsers.add_parser("packets", help="Nested-list packet ordering")
    packets_parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Packet file (default: {DEFAULT_INPUT_PATH})",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute the selected puzzle and print its answers."""
    config = SolverConfig(input_path=args.input)
    lines = read_lines(config.input_path)

    if args.command == "packets":
        answer = solve_packets(lines, config)
    else:
        root = build_tree(lines)
        if args.tree:
            for line in render_tree(root):
                print(line)
        answer = solve_tree(root, config)

    print(f"part 1 {answer.part1}")
    print(f"part 2 {answer.part2}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the console script and `python -m puzzletree`."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args)
    except FileNotFoundError as e:
        print(f"error: input file not found: {e.filename}", file=sys.stderr)
        return 1
    except PuzzleError as e:
        logger.debug("Puzzle failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
