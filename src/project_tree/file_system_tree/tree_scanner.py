"""Recursive directory scanner producing tree lines.

This module provides the TreeScanner class, which walks a directory depth-first and
renders every surviving entry as a line of an indented tree, honoring the ignore
list, the stop list and the configured .gitignore policy.
"""

import os
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional

from project_tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from project_tree.exclusion_rules.path_rules import PathPatternRules
from project_tree.file_system_tree.gitignore_policy import GitignorePolicy
from project_tree.styling import Styler, TextStyle
from project_tree.types import PathType

MID_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
MID_INDENT = "│   "
LAST_INDENT = "    "


class _Entry(NamedTuple):
    path: Path
    relative_path: str
    name: str
    is_dir: bool


def _display_name(name: str) -> str:
    """Return the name as output text, or "" if it cannot be encoded as UTF-8."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return name


class TreeScanner:
    """Renders a directory subtree as lines of an indented tree.

    Each directory's children are listed in sorted name order. An entry matching the
    ignore list is dropped before anything else happens to it, so neither it nor its
    descendants appear. A directory matching the stop list is listed with a trailing
    slash but not descended into.

    .gitignore Handling:
        Unless the policy is OFF, a .gitignore file found in a directory becomes the
        active ruleset for that directory and everything below it, replacing (not
        extending) the ruleset inherited from above. On leaving the directory the
        inherited ruleset applies again. The ruleset is passed down the recursion as a
        parameter, so there is no state to restore. What a match does depends on the
        policy:
        - IGNORE: the entry is dropped like an ignore-list match
        - STOP: a matched directory is listed but not descended into
        - DIM: the entry's name is dimmed, and every line below it is dimmed as well
        - DIM_AND_STOP: DIM and STOP together

    Errors:
        Any OSError raised while listing a directory aborts the whole scan. An
        unreadable .gitignore file is treated as absent.

    Attributes:
        ignore_rules (PathPatternRules): Entries removed from the tree.
        stop_rules (PathPatternRules): Directories listed but not descended into.
        prioritize_directories (bool): List directories before files.
        gitignore_policy (GitignorePolicy): Effect of .gitignore matches.
        styler (Styler): Renders plain and dimmed text.

    Example:
        >>> scanner = TreeScanner(stop_patterns=["target"])  # doctest: +SKIP
        >>> print(scanner.get_tree_representation("project", include_root=True))  # doctest: +SKIP
        project
        ├── Cargo.toml
        ├── src/
        │   └── main.rs
        └── target/
    """

    def __init__(
        self,
        ignore_patterns: Iterable[str] = (),
        stop_patterns: Iterable[str] = (),
        prioritize_directories: bool = False,
        gitignore_policy: GitignorePolicy = GitignorePolicy.DIM_AND_STOP,
        styler: Optional[Styler] = None,
    ) -> None:
        """Initialize a TreeScanner.

        Args:
            ignore_patterns: Paths or filenames to leave out of the tree entirely.
            stop_patterns: Paths or filenames of directories not to descend into.
            prioritize_directories: Whether directories are listed before files.
                Defaults to False.
            gitignore_policy: Effect of .gitignore matches. Defaults to DIM_AND_STOP.
            styler: Renders dimmed text. Defaults to a rich-backed Styler.
        """
        self.ignore_rules = PathPatternRules(ignore_patterns)
        self.stop_rules = PathPatternRules(stop_patterns)
        self.prioritize_directories = prioritize_directories
        self.gitignore_policy = GitignorePolicy(gitignore_policy)
        self.styler = styler if styler is not None else Styler()

    def scan(self, directory_path: PathType, line_prefix: str = "", draw_connectors: bool = False) -> List[str]:
        """Render the tree lines for everything below a directory.

        The directory itself gets no line; its children are listed at the top level.

        Args:
            directory_path: The directory to scan.
            line_prefix: Text placed before every line. Defaults to "".
            draw_connectors: Whether top-level entries get a connector glyph. Lines
                below the top level always have one. Defaults to False.

        Returns:
            The rendered lines, in display order.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the path isn't a directory.
            OSError: If any directory in the subtree cannot be listed.

        Example:
            >>> TreeScanner().scan("src")  # doctest: +SKIP
            ['main.rs', 'utils/', '    └── helpers.rs']
        """
        root = Path(directory_path)
        if not root.exists():
            raise FileNotFoundError(f"Root path does not exist: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {root}")

        return self._scan_directory(root, "", line_prefix, draw_connectors, None, TextStyle.PLAIN)

    def get_tree_representation(self, directory_path: PathType, include_root: bool = False) -> str:
        """Get the complete tree for a directory as a single string.

        Args:
            directory_path: The directory to scan.
            include_root: Whether to start with a line naming the directory itself,
                in which case top-level entries are drawn with connectors.

        Returns:
            The tree lines joined by newlines, without a trailing newline.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the path isn't a directory.
            OSError: If any directory in the subtree cannot be listed.
        """
        lines = self.scan(directory_path, draw_connectors=include_root)
        if include_root:
            resolved = Path(directory_path).resolve()
            lines.insert(0, resolved.name or str(resolved))
        return "\n".join(lines)

    def _scan_directory(
        self,
        path: Path,
        relative_path: str,
        prefix: str,
        draw_connectors: bool,
        gitignore: Optional[GitIgnoreExclusionRules],
        style: TextStyle,
    ) -> List[str]:
        """Recursively render the children of one directory."""
        if self.gitignore_policy is not GitignorePolicy.OFF:
            gitignore = GitIgnoreExclusionRules.from_directory(path) or gitignore

        entries = self._list_entries(path, relative_path, gitignore)
        if self.prioritize_directories:
            entries = [e for e in entries if e.is_dir] + [e for e in entries if not e.is_dir]

        lines: List[str] = []
        for i, entry in enumerate(entries):
            is_last = i == len(entries) - 1
            if draw_connectors:
                connector = LAST_CONNECTOR if is_last else MID_CONNECTOR
            else:
                connector = ""

            gitignored = gitignore is not None and gitignore.exclude(str(entry.path), entry.is_dir)
            dimmed = style is TextStyle.DIMMED or (gitignored and self.gitignore_policy.dims)
            lines.append(self._render_line(prefix, connector, entry, style, dimmed))

            if not entry.is_dir or self._matches(self.stop_rules, entry):
                continue
            if gitignored and self.gitignore_policy.stops:
                continue

            lines.extend(
                self._scan_directory(
                    entry.path,
                    entry.relative_path,
                    prefix + (LAST_INDENT if is_last else MID_INDENT),
                    True,
                    gitignore,
                    TextStyle.DIMMED if dimmed else TextStyle.PLAIN,
                )
            )

        return lines

    def _render_line(self, prefix: str, connector: str, entry: _Entry, style: TextStyle, dimmed: bool) -> str:
        suffix = "/" if entry.is_dir else ""
        name = _display_name(entry.name)
        if style is TextStyle.DIMMED:
            # Inside a dimmed subtree everything after the indentation is dimmed
            return prefix + self.styler.render(connector + name + suffix, TextStyle.DIMMED)
        if dimmed:
            return prefix + connector + self.styler.render(name, TextStyle.DIMMED) + suffix
        return prefix + connector + name + suffix

    def _list_entries(
        self, path: Path, relative_path: str, gitignore: Optional[GitIgnoreExclusionRules]
    ) -> List[_Entry]:
        entries = []
        for name in sorted(os.listdir(path)):
            child_path = path / name
            entry = _Entry(
                path=child_path,
                relative_path=f"{relative_path}/{name}" if relative_path else name,
                name=name,
                is_dir=child_path.is_dir(),
            )
            if self._matches(self.ignore_rules, entry):
                continue
            if (
                self.gitignore_policy is GitignorePolicy.IGNORE
                and gitignore is not None
                and gitignore.exclude(str(entry.path), entry.is_dir)
            ):
                continue
            entries.append(entry)
        return entries

    @staticmethod
    def _matches(rules: PathPatternRules, entry: _Entry) -> bool:
        # Absolute patterns compare against the on-disk path, relative ones against "./<relative>".
        # A name that has no text form is never compared on its own.
        match_name = _display_name(entry.name) != ""
        return rules.exclude(entry.path.as_posix(), entry.is_dir, match_name=match_name) or rules.exclude(
            "./" + entry.relative_path, entry.is_dir, match_name=match_name
        )
