"""Exclusion rules using the basic subset of .gitignore syntax understood by snapshots.

Two kinds of rules are supported:

- Wildcard rules contain ``*`` (any run of characters, ``/`` included) or ``?``
  (exactly one character). They must match either the whole relative path or
  its base name.
- Literal rules match a path equal to the rule, a path below a leading directory
  of that name, a path ending in a segment of that name, or a path with an
  intermediate directory of that name.

Negation, character classes and root anchoring are not interpreted: every other
character of a rule is taken literally.
"""

import posixpath
import re
from os import PathLike
from pathlib import Path
from typing import AnyStr, Iterable, List, Optional, Sequence, Tuple, Union

from pathspec import PathSpec
from pathspec.pattern import RegexMatchResult, RegexPattern

from dirsnap.types import PathType

from .base_rules import BaseExclusionRules

WILDCARD_CHARS = "*?"


class SnapshotIgnorePattern(RegexPattern):
    """A single compiled snapshot exclusion rule.

    The rule is translated into an anchored regular expression once, at
    construction time. Blank lines and comments compile to a null pattern
    (``include`` is None) that never matches, like pathspec's own
    ``GitWildMatchPattern``.

    Attributes:
        wildcard (bool): True if the rule contains ``*`` or ``?``.

    Example:
        >>> pattern = SnapshotIgnorePattern("*.log")
        >>> pattern.match_file("logs/app.log") is not None
        True
        >>> pattern.match_file("app.log.txt") is None
        True
    """

    def __init__(self, pattern: AnyStr, include: Optional[bool] = None) -> None:
        super().__init__(pattern, include=include)
        self.wildcard = (
            self.include is not None and isinstance(pattern, str) and any(c in pattern for c in WILDCARD_CHARS)
        )

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[Optional[str], Optional[bool]]:
        """Convert a raw rule line into a regular expression.

        Args:
            pattern: One line of an exclusion file.

        Returns:
            A ``(regex, include)`` pair. Both are None for blank and comment lines.

        Example:
            >>> SnapshotIgnorePattern.pattern_to_regex("# comment")
            (None, None)
            >>> SnapshotIgnorePattern.pattern_to_regex("*.log")
            ('(?s)^.*\\\\.log\\\\Z', True)
        """
        rule = pattern.strip()
        if not rule or rule.startswith("#"):
            return None, None

        if any(c in rule for c in WILDCARD_CHARS):
            body = "".join(".*" if c == "*" else "." if c == "?" else re.escape(c) for c in rule)
            return f"(?s)^{body}\\Z", True

        literal = re.escape(rule)
        return f"(?s)^(?:{literal}|{literal}/.*|.*/{literal}|.*/{literal}/.*)\\Z", True

    def match_file(self, file: str) -> Optional[RegexMatchResult]:
        """Match a relative path, falling back to its base name for wildcard rules."""
        result = super().match_file(file)
        if result is None and self.wildcard:
            result = super().match_file(posixpath.basename(file))
        return result


class SnapshotIgnoreExclusionRules(BaseExclusionRules):
    """Ordered set of snapshot exclusion rules backed by a pathspec ``PathSpec``.

    Rules can be supplied as raw lines, loaded from files such as ``.gitignore``,
    or added one at a time. Input lines are trimmed; empty lines and lines whose
    first non-blank character is ``#`` are dropped. Rules are never validated:
    any other line is accepted as a literal or wildcard rule.

    Attributes:
        spec (PathSpec): Compiled matcher holding one pattern per rule.

    Example:
        >>> rules = SnapshotIgnoreExclusionRules.from_lines(["# build output", "build", "*.log"])
        >>> rules.rules
        ['build', '*.log']
        >>> rules.exclude("a/build/x.js")
        True
        >>> rules.exclude("builder/x.js")
        False
        >>> rules.exclude("logs/app.log")
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading them from files.

        Args:
            rules_files: Path(s) of file(s) containing one rule per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[SnapshotIgnorePattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "SnapshotIgnoreExclusionRules":
        """Compile rules from raw exclusion-file lines.

        Args:
            lines: Raw lines, in order. Blank and comment lines are dropped.

        Returns:
            SnapshotIgnoreExclusionRules: The compiled rules.
        """
        rules = cls()
        rules._extend(lines)
        return rules

    @property
    def rules(self) -> List[str]:
        """The effective rules, trimmed, in evaluation order."""
        return [str(p.pattern).strip() for p in self._patterns]

    def exclude(self, path: str) -> bool:
        """Check if a relative path matches any loaded rule.

        Args:
            path: Path relative to the project root, using ``/`` separators.

        Returns:
            bool: True if any rule matches.
        """
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the rules found in one or more files.

        Args:
            rules_files: Path(s) of file(s) containing one rule per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self._extend(f.read().split("\n"))

    def add_rule(self, rule: str) -> None:
        """Append a single rule.

        Args:
            rule: One rule, e.g. ``"node_modules"`` or ``"*.pyc"``. Blank and
                comment rules are ignored.
        """
        self._extend([rule])

    def _extend(self, lines: Iterable[str]) -> None:
        patterns = [SnapshotIgnorePattern(line) for line in lines]
        self._patterns.extend(p for p in patterns if p.include is not None)
        self.spec = PathSpec(self._patterns)
