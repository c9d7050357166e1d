from abc import ABC, abstractmethod
from typing import Sequence, Union

from project_tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    This class serves as a contract for the rule types the tree scanner consults:
    fixed path patterns (ignore and stop lists) and .gitignore-style rules. All
    implementations must answer whether a given path matches. File loading and
    individual rule addition are optional capabilities that depend on the rule type.

    Example:
        >>> from project_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')  # Add rule programmatically
        >>> git_rules.exclude('test.pyc')
        True
        >>> git_rules.exclude('test.py')
        False
        >>>
        >>> from project_tree.exclusion_rules.path_rules import PathPatternRules
        >>> stop_rules = PathPatternRules(['target'])  # Constructor-only configuration
        >>> stop_rules.exclude('./target', is_dir=True)
        True
        >>> # stop_rules.load_rules('file.txt')  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """
        Determine if a given path matches the loaded rules.

        Args:
            path (str): The file or directory path to check.
            is_dir (bool): Whether the path names a directory. Rule types that
                distinguish directories (e.g. gitignore patterns ending in "/") use it;
                others ignore it.

        Returns:
            bool: True if the path matches the rules, False otherwise.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default
        implementation, which raises NotImplementedError.

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
            rule (str): The rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
