"""Literal directory-name exclusion rules.

These are the rules that keep dependency and build output directories out of a
snapshot. A pattern is a plain string, never a glob: it matches a directory whose
name, or whose path relative to the walked root, equals the pattern or starts with
the pattern followed by a path separator.
"""

from os import PathLike
from pathlib import Path
from typing import Collection, FrozenSet, Iterable, Optional, Sequence, Set, Union

from dir2clip.types import PathType

from .base_rules import BaseExclusionRules

DEFAULT_EXCLUSIONS: FrozenSet[str] = frozenset(
    {
        "node_modules",
        "dist",
        "build",
        "bin",
        "obj",
        "target",
        ".git",
        ".vs",
        ".idea",
        "out",
        "intermediate",
        "__pycache__",
        "venv",
        ".venv",
        ".next",
        "Debug",
        "Release",
    }
)


def should_exclude(name: str, patterns: Collection[str]) -> bool:
    """Check a directory name or relative path against literal exclusion patterns.

    A name is excluded when it equals a pattern or starts with the pattern followed by
    "/" or "\\". Matching is case-sensitive.

    Args:
        name: Directory name or relative directory path.
        patterns: Literal patterns to test against.

    Returns:
        True if any pattern matches.

    Example:
        >>> should_exclude("node_modules", {"node_modules"})
        True
        >>> should_exclude("node_modules/lodash", {"node_modules"})
        True
        >>> should_exclude("my_node_modules", {"node_modules"})
        False
        >>> should_exclude("Build", {"build"})
        False
    """
    for pattern in patterns:
        if name == pattern or name.startswith(pattern + "/") or name.startswith(pattern + "\\"):
            return True
    return False


class SegmentExclusionRules(BaseExclusionRules):
    """Exclusion rules made of literal directory names and path segments.

    The rule set is the union of the built-in DEFAULT_EXCLUSIONS and any patterns added
    afterwards. Only directories are ever excluded: paths passed to exclude() that do not
    end in "/" are treated as files and always kept.

    A directory is excluded when either its base name or its full root-relative path
    matches, so both "dist" and "packages/web/dist" work as patterns.

    Attributes:
        patterns (Set[str]): The current pattern set.

    Example:
        >>> rules = SegmentExclusionRules()
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("src/node_modules/")
        True
        >>> rules.exclude("src/")
        False
        >>> rules.add_rule("src/generated")
        >>> rules.exclude("src/generated/")
        True
        >>> rules.exclude("lib/generated/")
        False
    """

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        """Initialize the rule set.

        Args:
            patterns: Additional literal patterns. Blank entries are ignored.
            include_defaults: Whether to start from DEFAULT_EXCLUSIONS. Defaults to True.
        """
        self.patterns: Set[str] = set(DEFAULT_EXCLUSIONS) if include_defaults else set()
        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    def exclude(self, path: str) -> bool:
        if not path.endswith("/"):
            return False

        relative_path = path.rstrip("/")
        if not relative_path:
            return False

        name = relative_path.rsplit("/", 1)[-1]
        return should_exclude(name, self.patterns) or should_exclude(relative_path, self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add one literal pattern.

        Surrounding whitespace and trailing separators are stripped, so "dist/" and
        "dist" are the same pattern. Empty patterns are ignored.

        Example:
            >>> rules = SegmentExclusionRules(include_defaults=False)
            >>> rules.add_rule("  coverage/ ")
            >>> sorted(rules.patterns)
            ['coverage']
        """
        pattern = rule.strip().rstrip("/\\")
        if pattern:
            self.patterns.add(pattern)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load literal patterns from one or more files, one pattern per line.

        Blank lines and lines starting with "#" are skipped.

        Args:
            rules_files: Path(s) to the pattern file(s).

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
                for line in f.read().splitlines():
                    if line.strip().startswith("#"):
                        continue
                    self.add_rule(line)
