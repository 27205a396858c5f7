"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dir2clip.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Unlike the literal segment rules, these rules apply to files as well as
    directories, which makes it possible to drop things like lock files or logs from a
    snapshot. Matching is done by the pathspec library in the same way Git does it:
    globs, directory patterns ending in "/", negations starting with "!", "**" and
    comment lines are all supported.

    Rules from several files and individual rules added with add_rule() are combined in
    the order they were added, so later negations can re-include earlier matches.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.lock")
        >>> rules.exclude("poetry.lock")
        True
        >>> rules.add_rule("!keep.lock")
        >>> rules.exclude("keep.lock")
        False
        >>> rules.add_rule("fixtures/")
        >>> rules.exclude("tests/fixtures/")
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        self._lines.append(rule)
        self._compile()

    def has_rules(self) -> bool:
        """Check if any non-comment pattern is loaded."""
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
