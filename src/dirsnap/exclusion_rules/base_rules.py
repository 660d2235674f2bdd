import os
from abc import ABC, abstractmethod
from typing import Sequence, Union

from pathspec.util import normalize_file

from dirsnap.types import PathType


def relative_posix_path(entry_path: PathType, project_root: PathType) -> str:
    """Express an entry path relative to the project root with forward slashes.

    Rules are always matched against this form so that the same rule file behaves
    identically on every platform.

    Args:
        entry_path: Absolute (or root-relative) path of the entry.
        project_root: The project root directory.

    Returns:
        str: The relative path, e.g. ``"src/app/main.py"``.

    Example:
        >>> relative_posix_path("/work/proj/src/main.py", "/work/proj")
        'src/main.py'
    """
    return normalize_file(os.path.relpath(entry_path, project_root))


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Concrete rule types decide whether a path, expressed relative to the project
    root with forward slashes, is left out of a snapshot. Implementations must be
    deterministic: the answer may depend only on the path string and on the rules
    themselves, never on filesystem state or on how often they were consulted.
    File loading and individual rule addition are optional capabilities.

    Example:
        >>> from dirsnap.exclusion_rules.snapshot_rules import SnapshotIgnoreExclusionRules
        >>> rules = SnapshotIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/test.pyc')
        True
        >>> rules.exclude('pkg/test.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): Path relative to the project root, using ``/`` separators.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def exclude_path(self, entry_path: PathType, project_root: PathType) -> bool:
        """
        Determine if a filesystem entry below ``project_root`` should be excluded.

        Args:
            entry_path: Path of the entry being considered.
            project_root: The project root the rules are relative to.

        Returns:
            bool: True if the entry should be excluded.

        Example:
            >>> from dirsnap.exclusion_rules.snapshot_rules import SnapshotIgnoreExclusionRules
            >>> rules = SnapshotIgnoreExclusionRules.from_lines(["build"])
            >>> rules.exclude_path("/proj/a/build/x.js", "/proj")
            True
        """
        return self.exclude(relative_posix_path(entry_path, project_root))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types without file support use this default implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
