"""Command-line argument parsing for appletree.

This module defines the command-line interface for appletree,
handling argument parsing, validation and conversion to a TreeConfig.
"""

import argparse
import sys
from typing import List, NoReturn, Optional, Sequence, Tuple

from appletree import __version__
from appletree.config import TreeConfig
from appletree.exceptions import InvalidDepthError, InvalidThemeError
from appletree.file_system_tree.theme import Theme
from appletree.styling import COLOR_CHOICES, use_color

HELP_COMMAND = "help"


class TreeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def parse_depth(value: str) -> int:
    """Parse a depth ceiling, accepting only plain non-negative integers.

    Raises:
        argparse.ArgumentTypeError: If the value is not made up of digits only.
    """
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(str(InvalidDepthError(f"'{value}'")))
    return int(value)


def parse_theme(value: str) -> Theme:
    """Parse a theme name.

    Raises:
        argparse.ArgumentTypeError: If the theme is unknown.
    """
    try:
        return Theme.from_name(value)
    except InvalidThemeError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with appletree's options.
    """
    description = """
    appletree: a directory tree viewer.

    Prints the directory structure below PATH (default: the current directory)
    as a tree, with optional filtering, depth limiting and size annotations.
    """

    epilog = """
    Patterns:
      -e and -o take one or more patterns, collected until the next option.
      A pattern that is just a name (e.g. 'node_modules') matches entries with
      that basename anywhere. A pattern that contains '/' (e.g. 'src/main.cpp')
      matches only that relative path and its subtree. The exclude pattern '.'
      hides all hidden files and directories. Excludes take precedence over
      includes; parent folders of -o targets are shown automatically.

    Examples:
      appletree                        Show the tree of the current directory
      appletree /path/to/folder        Show the tree of the specified directory
      appletree -e node_modules        Exclude all 'node_modules' folders
      appletree -e src/main.cpp        Exclude only 'src/main.cpp'
      appletree -o src                 Show only the 'src' subtree
      appletree -o src/util/log.h      Show only that single file and its parents
      appletree -e . -d 2              Exclude hidden files and limit depth to 2
      appletree -s                     Show file & folder sizes (like du -sh)
      appletree -t round               Use round corners for the tree
      appletree help                   Show this message and exit
    """

    parser = TreeArgumentParser(
        prog="appletree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"appletree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="The directory to display (default: current directory). Use 'help' to show this message.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        nargs="+",
        action="extend",
        default=[],
        metavar="PATTERN",
        help="Exclude files or directories from the output (can be given multiple times).",
    )
    parser.add_argument(
        "-o",
        "--only",
        nargs="+",
        action="extend",
        default=[],
        metavar="PATTERN",
        help="Show only the given files or directories, their subtrees and their parents.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=parse_depth,
        metavar="N",
        help="Limit recursion depth: 0 shows only the root, 1 the root and its direct children.",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        action="store_true",
        help="Show file sizes and recursive directory totals.",
    )
    parser.add_argument(
        "-t",
        "--theme",
        type=parse_theme,
        default=Theme.CLASSIC,
        metavar="THEME",
        help="Drawing theme: 'classic' (default) or 'round'.",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default="auto",
        help="When to use ANSI styling (default: auto, only when writing to a terminal).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries to stderr.",
    )

    return parser


def parse_arguments(
    parser: argparse.ArgumentParser, argv: Optional[Sequence[str]] = None
) -> Tuple[argparse.Namespace, bool]:
    """Parse the command line and detect the bare 'help' command.

    'help' is recognised wherever it stands as an argument of its own, either
    in the path position or after it. A 'help' consumed as the value of -e or -o
    is an ordinary pattern.

    Args:
        parser: Parser from create_parser.
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        The parsed arguments and whether help was requested.
    """
    args, extras = parser.parse_known_args(argv)
    help_requested = args.path == HELP_COMMAND or HELP_COMMAND in extras
    unrecognized: List[str] = [arg for arg in extras if arg != HELP_COMMAND]
    if unrecognized and not help_requested:
        parser.error(f"unrecognized arguments: {' '.join(unrecognized)}")
    return args, help_requested


def build_config(args: argparse.Namespace) -> TreeConfig:
    """Convert parsed command-line arguments into a TreeConfig.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The immutable configuration for the renderer.
    """
    return TreeConfig(
        exclude_patterns=args.exclude,
        include_patterns=args.only,
        max_depth=args.depth,
        show_sizes=args.sizes,
        theme=args.theme,
        color=use_color(args.color, sys.stdout),
    )
