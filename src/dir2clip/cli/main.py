"""Command-line interface for dir2clip.

This module provides the dir2clip command, which copies a file, or a snapshot of a
directory (tree plus file contents), to the system clipboard. It handles argument
parsing, assembling exclusion rules, user feedback, and signal management.

Feedback:
    Success and failure messages are printed to stderr, so that -p/--print output on
    stdout stays clean.

Exit Codes:
    0: Successful completion
    1: Runtime error (target missing or unreadable, clipboard unavailable, ...)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Copy a directory snapshot
    $ dir2clip /path/to/dir

    # Print it instead
    $ dir2clip -p /path/to/dir
"""

import sys

from dir2clip.cli.argparser import create_parser, validate_args
from dir2clip.cli.safe_writer import SafeWriter
from dir2clip.cli.signal_handler import EXIT_SIGINT, setup_signal_handling, signal_handler
from dir2clip.clipboard import copy_to_clipboard
from dir2clip.exceptions import WalkInterruptedError
from dir2clip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules
from dir2clip.settings import combine_rules, read_env_patterns
from dir2clip.snapshot import Snapshot, create_snapshot
from dir2clip.types import EntryKind


def success_message(snapshot: Snapshot, destination: str = "clipboard") -> str:
    """Describe what was copied and where.

    Example:
        >>> success_message(Snapshot("", EntryKind.FILE, "main.py"))
        'Copied content of "main.py" to clipboard!'
        >>> success_message(Snapshot("", EntryKind.DIRECTORY, "proj"), "out.md")
        'Copied directory snapshot of "proj" to out.md!'
    """
    if snapshot.kind is EntryKind.DIRECTORY:
        return f'Copied directory snapshot of "{snapshot.name}" to {destination}!'
    return f'Copied content of "{snapshot.name}" to {destination}!'


def main() -> None:
    """Main entry point for the dir2clip command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Rule objects are populated while the command line is parsed
        segment_rules = SegmentExclusionRules(read_env_patterns())
        git_rules = GitIgnoreExclusionRules()

        parser = create_parser(segment_rules, git_rules)
        args = parser.parse_args()

        validate_args(args)

        snapshot = create_snapshot(
            args.target,
            exclusion_rules=combine_rules(segment_rules, git_rules),
            interrupt_check=signal_handler.interrupted,
        )

        # Ctrl+C after the last entry was read still cancels the copy
        if signal_handler.sigint_received.is_set():
            sys.exit(EXIT_SIGINT)

        if args.print or args.output is not None:
            output_file = args.output if args.output is not None else sys.stdout.fileno()
            with SafeWriter(output_file) as safe_writer:
                try:
                    safe_writer.write(snapshot.text)
                except BrokenPipeError:
                    pass  # SafeWriter will automatically close in the context manager
            if args.output is not None:
                print(success_message(snapshot, str(args.output)), file=sys.stderr)
        else:
            copy_to_clipboard(snapshot.text)
            print(success_message(snapshot), file=sys.stderr)

    except (WalkInterruptedError, KeyboardInterrupt):
        # Cancelled walk, or a second Ctrl+C
        sys.exit(EXIT_SIGINT)
    except Exception as e:
        print(f"Error: Failed to copy content: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
