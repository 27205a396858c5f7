from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2clip.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Exclusion rules decide which entries of a directory walk are left out of a snapshot.
    Paths handed to exclude() are relative to the root being walked, use forward slashes,
    and carry a trailing slash when they name a directory. Rule types may interpret that
    marker as they see fit; literal segment rules, for example, only ever exclude
    directories.

    Example:
        >>> from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules
        >>> rules = SegmentExclusionRules(include_defaults=False)
        >>> rules.add_rule('generated')
        >>> rules.exclude('generated/')
        True
        >>> rules.exclude('generated')  # a file of that name is kept
        False
        >>>
        >>> from dir2clip.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.log')
        >>> git_rules.exclude('server.log')
        True
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): Root-relative path using forward slashes. Directory paths end
                with "/".

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that cannot be loaded from files keep this default implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
