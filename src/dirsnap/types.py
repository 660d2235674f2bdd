from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Kind of a filesystem entry in a snapshot tree.

    Symbolic links and special files are classified as FILE: they are listed in
    the tree and their content is read on a best-effort basis, but they are never
    descended into.

    Attributes:
        FILE: Regular file, symlink or any other non-directory entry
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
