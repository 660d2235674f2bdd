"""Assembly of complete snapshot documents.

This module ties the exclusion rules, the file system tree, the tree renderer
and the content reader together into one Markdown document per run.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dirsnap.exclusion_rules.base_rules import BaseExclusionRules
from dirsnap.exclusion_rules.matcher import compile_matcher
from dirsnap.file_content_reader import FileContentReader
from dirsnap.file_system_tree.file_system_tree import FileSystemTree
from dirsnap.file_system_tree.permission_action import PermissionAction
from dirsnap.file_system_tree.tree_renderer import render_tree
from dirsnap.output_strategies.base_strategy import OutputStrategy
from dirsnap.output_strategies.markdown_strategy import MarkdownOutputStrategy
from dirsnap.timestamps import format_human_date
from dirsnap.types import PathType


def format_project_title(directory_name: str) -> str:
    """Turn a kebab-case or snake_case directory name into a title.

    The name is split on hyphens and underscores and every segment is
    capitalized (first letter upper case, the rest lower case).

    Example:
        >>> format_project_title("my-cool_PROJECT")
        'My Cool Project'
    """
    return " ".join(segment.capitalize() for segment in re.split(r"[-_]", directory_name))


class SnapshotBuilder:
    """Builds the snapshot document of a project directory.

    Each call to :meth:`build` walks the project once and derives both the
    rendered tree and the file contents section from that single walk, so the
    two sections always list the same files in the same order. The document is
    assembled in memory; persisting it is left to the caller.

    Attributes:
        project_root (Path): Absolute path of the project root.
        exclusion_rules (BaseExclusionRules): Rules consulted for every entry.
        permission_action (PermissionAction): How to handle unlistable subdirectories.

    Example:
        >>> builder = SnapshotBuilder("/path/to/my-project")  # doctest: +SKIP
        >>> document = builder.build(datetime(2025, 11, 22, 17, 55))  # doctest: +SKIP
        >>> document.splitlines()[0]  # doctest: +SKIP
        '# My Project'
    """

    def __init__(
        self,
        project_root: PathType,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        output_strategy: Optional[OutputStrategy] = None,
        content_reader: Optional[FileContentReader] = None,
        permission_action: PermissionAction = PermissionAction.RAISE,
    ) -> None:
        """Initialize the builder.

        Args:
            project_root: Resolved project root directory.
            exclusion_rules: Rules for excluding entries. Defaults to a matcher
                with no user rules that only excludes the ``snapshots`` directory.
            output_strategy: Document format. Defaults to Markdown.
            content_reader: Reader for file contents. Defaults to UTF-8 with a
                100,000 character limit.
            permission_action: How to handle unlistable subdirectories.
                Defaults to RAISE.
        """
        self.project_root = Path(project_root).resolve()
        self.exclusion_rules = exclusion_rules if exclusion_rules is not None else compile_matcher()
        self.output_strategy = output_strategy if output_strategy is not None else MarkdownOutputStrategy()
        self.content_reader = content_reader if content_reader is not None else FileContentReader()
        self.permission_action = permission_action
        self._directory_count: Optional[int] = None
        self._file_count: Optional[int] = None
        self._symlink_count: Optional[int] = None

    @property
    def directory_count(self) -> Optional[int]:
        """Number of directories (excluding root) in the last built snapshot, or None before any build."""
        return self._directory_count

    @property
    def file_count(self) -> Optional[int]:
        """Number of files in the last built snapshot, or None before any build."""
        return self._file_count

    @property
    def symlink_count(self) -> Optional[int]:
        """Number of symbolic links among the files of the last built snapshot, or None before any build."""
        return self._symlink_count

    def build(self, now: datetime) -> str:
        """Build the complete snapshot document.

        Args:
            now: The instant the snapshot is taken at. Every date-derived string
                of the document comes from this value.

        Returns:
            str: The document text.

        Raises:
            FileNotFoundError: If the project root doesn't exist.
            NotADirectoryError: If the project root isn't a directory.
            PermissionError: If the root cannot be listed, or a subdirectory
                cannot be listed and permission_action is RAISE.
        """
        strategy = self.output_strategy
        fs_tree = FileSystemTree(self.project_root, self.exclusion_rules, permission_action=self.permission_action)
        root = fs_tree.get_tree()

        parts: List[str] = [
            strategy.format_header(format_project_title(root.name), format_human_date(now)),
            strategy.format_tree(root.name, render_tree(root)),
            strategy.format_contents_heading(),
        ]

        for _file_path, relative_path, content in self.content_reader.yield_file_contents(fs_tree):
            parts.append(strategy.format_start(relative_path))
            parts.append(strategy.format_content(content))
            parts.append(strategy.format_end())

        self._directory_count = fs_tree.get_directory_count()
        self._file_count = fs_tree.get_file_count()
        self._symlink_count = fs_tree.get_symlink_count()

        return "".join(parts)
