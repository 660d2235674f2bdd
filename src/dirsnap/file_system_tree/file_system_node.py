"""Node representation for file system entries in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node

from dirsnap.types import EntryKind


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in a snapshot tree.

    Extends anytree.Node with the entry's absolute path and kind. Children are
    attached in their final display order by the tree builder, so iterating
    ``children`` (or any anytree iterator) observes directories first, then
    files, each group sorted by name.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        abs_path (Path): Absolute path of the entry.
        relative_path (str): Path relative to the project root, with forward slashes.
        kind (EntryKind): Whether the entry is a directory or a file.
        is_symlink (bool): True if the entry is a symbolic link.

    Example:
        >>> root = FileSystemNode("proj", Path("/proj"), EntryKind.DIRECTORY)
        >>> child = FileSystemNode("main.py", Path("/proj/main.py"), parent=root, relative_path="main.py")
        >>> child.is_dir
        False
        >>> [n.name for n in root.children]
        ['main.py']
    """

    def __init__(
        self,
        name: str,
        abs_path: Path,
        kind: EntryKind = EntryKind.FILE,
        parent: Optional["FileSystemNode"] = None,
        is_symlink: bool = False,
        relative_path: str = "",
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            abs_path: Absolute path of the entry.
            kind: Entry kind. Defaults to FILE.
            parent: The parent node. Defaults to None.
            is_symlink: Whether the entry is a symbolic link. Defaults to False.
            relative_path: Path relative to the project root. Empty for the root.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.abs_path = abs_path
        self.relative_path = relative_path
        self.kind = kind
        self.is_symlink = is_symlink

    @property
    def is_dir(self) -> bool:
        """True if this node represents a directory."""
        return self.kind is EntryKind.DIRECTORY
