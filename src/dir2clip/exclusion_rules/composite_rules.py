"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclusion rules that combine several rule objects.

    A path is excluded if ANY of the constituent rules excludes it. This is how the
    literal directory rules and the optional .gitignore-style rules are applied together
    during a walk.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent exclusion rules.

    Example:
        >>> from dir2clip.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("*.log")
        >>> composite = CompositeExclusionRules([SegmentExclusionRules(), git_rules])
        >>> composite.exclude("node_modules/")
        True
        >>> composite.exclude("app.log")
        True
        >>> composite.exclude("src/app.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
