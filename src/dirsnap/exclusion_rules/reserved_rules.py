"""Exclusion of the snapshot output directory itself."""

from .base_rules import BaseExclusionRules

DEFAULT_RESERVED_NAME = "snapshots"


class ReservedDirectoryExclusionRules(BaseExclusionRules):
    """Always excludes one reserved top-level directory.

    The output directory lives inside the project it snapshots. Excluding it
    unconditionally keeps a snapshot from containing earlier snapshots,
    whatever the user-supplied rules say.

    Attributes:
        name (str): Name of the reserved directory, relative to the project root.

    Example:
        >>> rules = ReservedDirectoryExclusionRules("snapshots")
        >>> rules.exclude("snapshots/Sat-11-22-2025/snap.md")
        True
        >>> rules.exclude("snapshots-old/notes.md")
        False
    """

    def __init__(self, name: str = DEFAULT_RESERVED_NAME) -> None:
        if not name or name.strip("/") != name:
            raise ValueError(f"Invalid reserved directory name: {name!r}")
        self.name = name

    def exclude(self, path: str) -> bool:
        return path == self.name or path.startswith(self.name + "/")
