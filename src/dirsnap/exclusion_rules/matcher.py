"""Compilation of raw exclusion-file lines into the matcher used for a snapshot run."""

from typing import Iterable, Optional

from .composite_rules import CompositeExclusionRules
from .reserved_rules import DEFAULT_RESERVED_NAME, ReservedDirectoryExclusionRules
from .snapshot_rules import SnapshotIgnoreExclusionRules


def compile_matcher(
    raw_lines: Iterable[str] = (),
    reserved_name: str = DEFAULT_RESERVED_NAME,
    ignore_rules: Optional[SnapshotIgnoreExclusionRules] = None,
) -> CompositeExclusionRules:
    """Build the matcher consulted for every entry of a snapshot.

    The reserved output directory check always comes first, followed by the
    user rules in their original order.

    Args:
        raw_lines: Raw exclusion-file lines (e.g. the lines of ``.gitignore``).
        reserved_name: Name of the output directory to exclude unconditionally.
        ignore_rules: Already populated rules to append ``raw_lines`` to. A new
            set is created when omitted.

    Returns:
        CompositeExclusionRules: The compiled matcher.

    Example:
        >>> matcher = compile_matcher(["node_modules", "*.log"])
        >>> matcher.exclude("snapshots/x.md"), matcher.exclude("web/node_modules/a.js")
        (True, True)
        >>> matcher.exclude("src/index.js")
        False
    """
    if ignore_rules is None:
        ignore_rules = SnapshotIgnoreExclusionRules()
    for line in raw_lines:
        ignore_rules.add_rule(line)
    return CompositeExclusionRules([ReservedDirectoryExclusionRules(reserved_name), ignore_rules])
