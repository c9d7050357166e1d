"""Exclusion rules matching fixed path patterns, used for ignore and stop lists."""

from pathlib import PurePath
from typing import AbstractSet, Iterable

from .base_rules import BaseExclusionRules


def _normalize_pattern(pattern: str) -> str:
    # "target/" names the same entry as "target"
    stripped = pattern.rstrip("/")
    return stripped or pattern


def matches_path_pattern(patterns: AbstractSet[str], path: str, match_name: bool = True) -> bool:
    """Check a discovered path against a set of configured path patterns.

    A path matches if it equals a member of the set, if it equals a member once a
    leading "./" is removed, or if its final component alone equals a member. This
    lets patterns be written root-relative ("./src/main.rs"), bare-relative
    ("src/main.rs") or as a filename ("main.rs").

    Args:
        patterns: The configured patterns.
        path: The path to check, using "/" as separator.
        match_name: Whether the final-component form is compared. Defaults to True.

    Returns:
        True if any of the three comparison forms is in the set.

    Example:
        >>> patterns = {"src/main.rs"}
        >>> matches_path_pattern(patterns, "./src/main.rs")
        True
        >>> matches_path_pattern({"main.rs"}, "./src/main.rs")
        True
        >>> matches_path_pattern({"src"}, "./src/main.rs")
        False
    """
    if path in patterns:
        return True
    if path.startswith("./") and path[2:] in patterns:
        return True
    if not match_name:
        return False
    name = PurePath(path).name
    return bool(name) and name in patterns


class PathPatternRules(BaseExclusionRules):
    """Exclusion rules built from a fixed set of path patterns.

    Backs both the ignore list (entries removed from the tree) and the stop list
    (directories listed but not descended into). Patterns are given at construction
    or added one at a time; they are not loaded from files.

    Attributes:
        patterns (frozenset): The normalized patterns.

    Example:
        >>> rules = PathPatternRules(["./target", ".git"])
        >>> rules.exclude("target")
        False
        >>> rules.exclude("./target")
        True
        >>> rules.exclude("./sub/.git", is_dir=True)
        True
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self.patterns = frozenset(_normalize_pattern(p) for p in patterns)

    def exclude(self, path: str, is_dir: bool = False, match_name: bool = True) -> bool:
        return matches_path_pattern(self.patterns, path, match_name=match_name)

    def add_rule(self, rule: str) -> None:
        self.patterns = self.patterns | {_normalize_pattern(rule)}

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self.patterns)!r})"
