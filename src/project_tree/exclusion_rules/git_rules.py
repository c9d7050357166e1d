"""Implementation of exclusion rules using .gitignore pattern syntax."""

import os
from os import PathLike
from pathlib import Path, PurePath
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from project_tree.types import PathType

from .base_rules import BaseExclusionRules

GITIGNORE_FILENAME = ".gitignore"


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore pattern
    matching rules. It uses the pathspec library to match file paths against patterns in
    the same way that Git does.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Anchored patterns (starting with /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    When a base directory is given, paths passed to exclude() are first made relative
    to it, so anchored patterns like "/target" resolve against the directory holding the
    .gitignore file rather than against the current working directory. Paths outside
    the base directory never match.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.
        base_directory (Optional[Path]): Directory the patterns are relative to.

    Example:
        >>> import tempfile
        >>> import os
        >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        ...     _ = f.write('node_modules/\\n')
        >>> rules = GitIgnoreExclusionRules(f.name)
        >>> rules.exclude("node_modules", is_dir=True)
        True
        >>> rules.exclude("node_modules")
        False
        >>> rules.add_rule("*.log")
        >>> rules.exclude("app.log")
        True
        >>> os.unlink(f.name)
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base_directory: Optional[PathType] = None,
    ):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
            base_directory: Directory that matched paths are made relative to.
                Defaults to None, meaning paths are matched exactly as given.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.base_directory = Path(base_directory) if base_directory is not None else None
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    @classmethod
    def from_directory(cls, directory: PathType) -> Optional["GitIgnoreExclusionRules"]:
        """Build the ruleset for the .gitignore file directly inside a directory.

        Args:
            directory: The directory to look in.

        Returns:
            The ruleset, scoped to the directory, or None if the directory has no
            .gitignore file or the file cannot be read as text.

        Example:
            >>> import tempfile
            >>> with tempfile.TemporaryDirectory() as d:
            ...     GitIgnoreExclusionRules.from_directory(d) is None
            True
        """
        rules_file = Path(directory) / GITIGNORE_FILENAME
        if not rules_file.is_file():
            return None
        try:
            return cls(rules_file, base_directory=directory)
        except (OSError, UnicodeDecodeError):
            return None

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check if a path matches the loaded .gitignore patterns.

        Args:
            path: The path to check. Relative to base_directory when one is set,
                otherwise matched exactly as provided.
            is_dir: Whether the path names a directory, which lets patterns with a
                trailing slash apply.

        Returns:
            bool: True if the path matches a non-negated pattern that isn't overridden
                by a later negation, False otherwise.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("test.pyc")
            True
            >>> rules.exclude("important.pyc")
            False
        """
        candidate = self._relative_path(path)
        if candidate is None:
            return False
        if is_dir and not candidate.endswith("/"):
            candidate += "/"
        return self.spec.match_file(candidate)

    def _relative_path(self, path: str) -> Optional[str]:
        if self.base_directory is None:
            return str(path)
        try:
            relative = os.path.relpath(os.path.abspath(path), os.path.abspath(self.base_directory))
        except ValueError:
            # Different drives on Windows
            return None
        if relative == os.curdir or relative == os.pardir or relative.startswith(os.pardir + os.sep):
            return None
        return PurePath(relative).as_posix()

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are processed in the order they are added, with later patterns
        potentially overriding earlier ones (especially in the case of negation with !).

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            UnicodeDecodeError: If a rules file is not valid UTF-8.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern to add (e.g., "*.pyc", "node_modules/",
                 "!important.txt").
        """
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)
