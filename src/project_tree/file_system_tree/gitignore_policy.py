"""Gitignore policy enum controlling how .gitignore matches affect the tree."""

from enum import Enum


class GitignorePolicy(str, Enum):
    """Effect of a .gitignore match on a scanned entry.

    Values:
        OFF: .gitignore files are not read
        IGNORE: Matched entries are removed from the tree
        STOP: Matched directories are listed but not descended into
        DIM: Matched entries are rendered dimmed, along with everything below them
        DIM_AND_STOP: DIM and STOP combined (default behavior)
    """

    OFF = "off"
    IGNORE = "ignore"
    STOP = "stop"
    DIM = "dim"
    DIM_AND_STOP = "dim-and-stop"

    @property
    def dims(self) -> bool:
        return self in (GitignorePolicy.DIM, GitignorePolicy.DIM_AND_STOP)

    @property
    def stops(self) -> bool:
        return self in (GitignorePolicy.STOP, GitignorePolicy.DIM_AND_STOP)
