"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules, relative_posix_path
from .composite_rules import CompositeExclusionRules
from .matcher import compile_matcher
from .reserved_rules import DEFAULT_RESERVED_NAME, ReservedDirectoryExclusionRules
from .snapshot_rules import SnapshotIgnoreExclusionRules, SnapshotIgnorePattern

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DEFAULT_RESERVED_NAME",
    "ReservedDirectoryExclusionRules",
    "SnapshotIgnoreExclusionRules",
    "SnapshotIgnorePattern",
    "compile_matcher",
    "relative_posix_path",
]
