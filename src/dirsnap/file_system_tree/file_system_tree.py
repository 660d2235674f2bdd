"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a project directory
once and keeps the filtered, ordered result as a tree of FileSystemNode objects.
The rendered tree and the file content dump of a snapshot are both derived from
that single tree, so they always agree on which entries appear and in which
order.
"""

import locale
import os
import stat
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from dirsnap.exclusion_rules.base_rules import BaseExclusionRules
from dirsnap.file_system_tree.file_system_node import FileSystemNode
from dirsnap.file_system_tree.permission_action import PermissionAction
from dirsnap.file_system_tree.tree_renderer import render_tree
from dirsnap.types import EntryKind, PathType


def entry_sort_key(name: str, is_dir: bool) -> Tuple[bool, str, str]:
    """Sort key placing directories before files, then ordering names by locale.

    The collation key comes from ``locale.strxfrm`` and therefore follows the
    process's LC_COLLATE setting. The raw name breaks ties between names that
    collate equally, so the order is always total.

    Args:
        name: Entry name.
        is_dir: Whether the entry is a directory.

    Returns:
        A tuple suitable for ``sorted(key=...)``.

    Example:
        >>> names = [("z.txt", False), ("b", True), ("y.txt", False), ("a", True)]
        >>> [n for n, d in sorted(names, key=lambda e: entry_sort_key(*e))]
        ['a', 'b', 'y.txt', 'z.txt']
    """
    return (not is_dir, locale.strxfrm(name), name)


def display_name(name: str) -> str:
    """Entry name as shown in a snapshot, with undecodable bytes replaced by U+FFFD.

    On POSIX, names that are not valid UTF-8 are listed with surrogate escapes;
    those cannot be written as UTF-8 text and are decoded lossily instead.
    """
    return os.fsencode(name).decode("utf-8", "replace")


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access and then reused. Within every
    directory, children are ordered directories first, then files, each group
    sorted with :func:`entry_sort_key`. Entries whose root-relative path is
    excluded by the rules are left out together with everything below them.
    Directories that end up empty stay in the tree.

    Symbolic Link Behavior:
        Symbolic links are never followed during traversal. A link is listed as a
        file-kind entry (even when it points at a directory) and its content is
        read through the link on a best-effort basis.

    Permission Handling:
        Failure to list the root directory is always fatal. Failure to list a
        directory below the root is handled according to ``permission_action``:
        - RAISE (default): raise PermissionError (or OSError) naming the directory
        - IGNORE: keep the directory node without children

    Attributes:
        root_path (Path): The absolute path to the root directory.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.
        permission_action (PermissionAction): How to handle unlistable subdirectories.

    Example:
        >>> tree = FileSystemTree(".")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        project
        ├── src
        │   └── main.py
        └── README.md
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.RAISE,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
            permission_action: How to handle unlistable subdirectories. Defaults to RAISE.
        """
        self.root_path = Path(root_path).resolve()
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0
        self._symlink_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it on first access.

        Returns:
            The root node of the tree.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            PermissionError: If the root cannot be listed, or a subdirectory cannot
                be listed and permission_action is RAISE.
        """
        if self._tree is None:
            self._tree = self._build_tree()
            self._count_entries()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        """Walk the root directory and return the populated root node."""
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(display_name(self.root_path.name), self.root_path, EntryKind.DIRECTORY)

        # Explicit stack instead of recursion: depth is bounded only by the filesystem
        pending: List[FileSystemNode] = [root]
        while pending:
            node = pending.pop()
            names = self._list_directory(node, is_root=node is root)
            for child in self._create_children(node, names):
                if child.is_dir:
                    pending.append(child)

        return root

    def _list_directory(self, node: FileSystemNode, is_root: bool) -> List[str]:
        try:
            return os.listdir(node.abs_path)
        except PermissionError as e:
            if is_root or self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Access denied to {node.abs_path}: {e}") from e
        except OSError as e:
            if is_root or self.permission_action == PermissionAction.RAISE:
                raise OSError(f"Error accessing {node.abs_path}: {e}") from e
        return []

    def _create_children(self, parent: FileSystemNode, names: List[str]) -> List[FileSystemNode]:
        """Filter, classify and attach the children of ``parent`` in display order."""
        candidates = []
        for name in names:
            shown = display_name(name)
            relative_path = f"{parent.relative_path}/{shown}" if parent.relative_path else shown
            if self.exclusion_rules is not None and self.exclusion_rules.exclude(relative_path):
                continue
            kind, is_symlink = self._classify(parent.abs_path / name)
            candidates.append((name, shown, relative_path, kind, is_symlink))

        candidates.sort(key=lambda c: entry_sort_key(c[1], c[3] is EntryKind.DIRECTORY))

        # Names shown and matched are decoded; the absolute path keeps the name as listed
        return [
            FileSystemNode(
                shown,
                parent.abs_path / name,
                kind,
                parent=parent,
                is_symlink=is_symlink,
                relative_path=relative_path,
            )
            for name, shown, relative_path, kind, is_symlink in candidates
        ]

    @staticmethod
    def _classify(path: Path) -> Tuple[EntryKind, bool]:
        """Classify an entry without following symbolic links.

        Returns:
            The entry kind and whether the entry is a symbolic link. An entry that
            vanished since it was listed is reported as a plain file; reading its
            content will then fail and be reported in the document.
        """
        try:
            mode = path.lstat().st_mode
        except OSError:
            return EntryKind.FILE, False
        if stat.S_ISLNK(mode):
            return EntryKind.FILE, True
        if stat.S_ISDIR(mode):
            return EntryKind.DIRECTORY, False
        return EntryKind.FILE, False

    def _count_entries(self) -> None:
        """Count files, directories (excluding the root) and symlinks in the tree."""
        self._file_count = 0
        self._directory_count = 0
        self._symlink_count = 0

        if self._tree is None:
            return

        for node in PreOrderIter(self._tree):
            if node is self._tree:
                continue
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1
                if node.is_symlink:
                    self._symlink_count += 1

    def get_file_count(self) -> int:
        """Get the total number of file-kind entries in the tree, symlinks included."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding root)."""
        self.get_tree()
        return self._directory_count

    def get_symlink_count(self) -> int:
        """Get the total number of symbolic links in the tree."""
        self.get_tree()
        return self._symlink_count

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all file-kind entries in display order.

        Files are yielded depth-first, following the same directories-first,
        locale-sorted order used by the rendered tree.

        Yields:
            Pairs of (absolute_path, relative_path) for each file. Relative paths
            use forward slashes.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for abs_path, rel_path in tree.iterate_files():  # doctest: +SKIP
            ...     print(rel_path)
            utils/helpers.py
            main.py
        """
        for node in PreOrderIter(self.get_tree(), filter_=lambda n: not n.is_dir):
            yield str(node.abs_path), node.relative_path

    def get_tree_representation(self) -> str:
        """Get the tree as text: the root name on the first line, then the rendered tree.

        Returns:
            The complete tree representation, every line terminated by a newline.
        """
        root = self.get_tree()
        return f"{root.name}\n{render_tree(root)}"
