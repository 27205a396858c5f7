"""Environment-provided settings.

Extra literal exclusion patterns can be supplied through the DIR2CLIP_EXCLUDE
environment variable, which is read once per invocation. Entries are separated by
os.pathsep or commas, e.g. DIR2CLIP_EXCLUDE="coverage,.tox".
"""

import os
import re
from typing import List, Mapping, Optional

from dir2clip.exclusion_rules.base_rules import BaseExclusionRules
from dir2clip.exclusion_rules.composite_rules import CompositeExclusionRules
from dir2clip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules

ENV_EXCLUDE = "DIR2CLIP_EXCLUDE"


def read_env_patterns(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Read extra exclusion patterns from the environment.

    Example:
        >>> read_env_patterns({"DIR2CLIP_EXCLUDE": "coverage, .tox,,"})
        ['coverage', '.tox']
        >>> read_env_patterns({})
        []
    """
    env = os.environ if environ is None else environ
    raw = env.get(ENV_EXCLUDE, "")
    separators = "," + re.escape(os.pathsep)
    return [part.strip() for part in re.split(f"[{separators}]", raw) if part.strip()]


def combine_rules(segment_rules: SegmentExclusionRules, git_rules: GitIgnoreExclusionRules) -> BaseExclusionRules:
    """Combine literal and .gitignore-style rules into the rules used for a walk.

    The git rules are only included when any were loaded.
    """
    if git_rules.has_rules():
        return CompositeExclusionRules([segment_rules, git_rules])
    return segment_rules
