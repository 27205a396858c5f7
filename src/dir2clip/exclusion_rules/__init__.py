"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .segment_rules import DEFAULT_EXCLUSIONS, SegmentExclusionRules, should_exclude

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DEFAULT_EXCLUSIONS",
    "GitIgnoreExclusionRules",
    "SegmentExclusionRules",
    "should_exclude",
]
