"""Command-line interface for appletree.

This module provides the command-line interface for appletree, which prints
the structure of a directory as a tree. It handles command-line argument
parsing, output writing and signal management for graceful interruption
handling.

Key Features:
    - Directory tree visualization with classic or round glyphs
    - Exclude (-e) and only (-o) patterns
    - Depth limiting
    - File sizes and recursive directory totals
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Exit Codes:
    0: Successful completion, or help/version shown
    1: Usage error or nonexistent root path
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Tree of the current directory without hidden entries, two levels deep
    $ appletree -e . -d 2

    # Only the src subtree, with sizes
    $ appletree /path/to/project -o src -s
"""

import logging
import sys

from appletree.cli.argparser import build_config, create_parser, parse_arguments
from appletree.cli.safe_writer import SafeWriter
from appletree.cli.signal_handler import setup_signal_handling, signal_handler
from appletree.file_system_tree.file_system_tree import FileSystemTree


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Main entry point for the appletree command-line interface.

    Exit codes:
        0: Successful completion, or help/version shown
        1: Usage error or nonexistent root path
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    parser = create_parser()
    # argparse exits with status 1 on usage errors and 0 for -h/--version
    args, help_requested = parse_arguments(parser)

    if help_requested:
        parser.print_help()
        sys.exit(0)

    configure_logging(args.verbose)

    try:
        config = build_config(args)
        tree = FileSystemTree(args.path if args.path is not None else ".", config)

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                lines = tree.stream_tree_representation()
                # Resolve the root before anything is printed
                first = next(lines)
                safe_writer.write("\n")
                safe_writer.write(first + "\n")
                for line in lines:
                    safe_writer.write(line + "\n")
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except FileNotFoundError as e:
        print(f"Error: {str(e)} Try again with a valid path.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    status = signal_handler.exit_status()
    if status is not None:
        sys.exit(status)


if __name__ == "__main__":
    main()
