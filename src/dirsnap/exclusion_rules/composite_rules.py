"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. Rules are
    consulted in the order given and evaluation stops at the first match, so the
    reserved output directory check placed first is decided before any
    user-supplied rule is looked at.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dirsnap.exclusion_rules.reserved_rules import ReservedDirectoryExclusionRules
        >>> from dirsnap.exclusion_rules.snapshot_rules import SnapshotIgnoreExclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [ReservedDirectoryExclusionRules("snapshots"), SnapshotIgnoreExclusionRules.from_lines(["*.log"])]
        ... )
        >>> composite.exclude("snapshots")
        True
        >>> composite.exclude("app.log")
        True
        >>> composite.exclude("app.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Args:
            path: File or directory path to check.

        Returns:
            True if ANY of the constituent rules excludes the path.
        """
        return any(rule.exclude(path) for rule in self.rules)
