"""Command-line argument parsing for dir2clip.

This module defines the command-line interface for dir2clip,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dir2clip import __version__
from dir2clip.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(
    segment_rules: BaseExclusionRules, git_rules: BaseExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class that feeds exclusion options into rule objects.

    -i/--ignore and -I/--ignore-file go to the literal segment rules; -e/--exclude loads
    .gitignore-style files into the git rules. Rule files are loaded as soon as the
    option is parsed, so a missing file fails early.

    Args:
        segment_rules: Rules receiving literal directory patterns.
        git_rules: Rules receiving .gitignore-style files.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                git_rules.load_rules(values if isinstance(values, (str, os.PathLike)) else Path(str(values)))
            elif option_string in ("-I", "--ignore-file"):
                segment_rules.load_rules(values if isinstance(values, (str, os.PathLike)) else Path(str(values)))
            else:  # -i/--ignore
                segment_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(segment_rules: BaseExclusionRules, git_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        segment_rules: Rules receiving literal directory patterns.
        git_rules: Rules receiving .gitignore-style files.

    Returns:
        An ArgumentParser instance configured with dir2clip's options.
    """
    description = """
    dir2clip: copy a file, or a snapshot of a directory, to the clipboard.

    For a file, the clipboard receives the file name followed by its content in a
    fenced block. For a directory, it receives an indented tree of the directory
    followed by a fenced block for every text file beneath it.

    Common dependency and build directories (node_modules, dist, build, .git,
    __pycache__, venv, ...) are skipped, and binary files are left out of the
    contents. Extra directory names to skip can be given with -i/--ignore or
    through the DIR2CLIP_EXCLUDE environment variable.
    """

    epilog = """
    Examples:
      # Copy a single file
      dir2clip src/main.py

      # Copy a snapshot of the current directory
      dir2clip .

      # Skip more directories by name or relative path
      dir2clip -i coverage -i docs/generated /path/to/project

      # Read directory names to skip from a file, one per line
      dir2clip -I .dir2clipignore /path/to/project

      # Also apply .gitignore rules (these can exclude files too)
      dir2clip -e .gitignore /path/to/project

      # Print instead of copying, or write to a file
      dir2clip -p /path/to/project | less
      dir2clip -o snapshot.md /path/to/project

      # Display version information and exit
      dir2clip -V
    """

    parser = argparse.ArgumentParser(
        prog="dir2clip",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2clip {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(segment_rules, git_rules)

    parser.add_argument(
        "target",
        type=Path,
        help="The file or directory to copy.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="NAME",
        action=ExclusionAction,
        help=(
            "Directory name or relative directory path to skip, matched literally (no wildcards). "
            "Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-I",
        "--ignore-file",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="File listing directory names to skip, one per line (can be specified multiple times).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help=(
            "Path to a .gitignore-style file whose patterns exclude files and directories "
            "(can be specified multiple times)."
        ),
    )

    destination = parser.add_mutually_exclusive_group()
    destination.add_argument(
        "-p",
        "--print",
        action="store_true",
        help="Write the snapshot to stdout instead of the clipboard.",
    )
    destination.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Write the snapshot to FILE instead of the clipboard.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse handles.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"--output must be a file path, not a directory: {args.output}")
