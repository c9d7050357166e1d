"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .path_rules import PathPatternRules, matches_path_pattern

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
    "PathPatternRules",
    "matches_path_pattern",
]
