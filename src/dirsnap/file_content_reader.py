"""File content reading with placeholders for oversized and unreadable files.

Reading a single file never aborts a snapshot: if the file is too large, or
cannot be opened or decoded, a short bracketed placeholder is returned in place
of its content.
"""

import math
import os
import stat
from typing import Iterator, Tuple

from .file_system_tree.file_system_tree import FileSystemTree, display_name
from .types import PathType

DEFAULT_MAX_CHARACTERS = 100_000


def format_size_placeholder(character_count: int) -> str:
    """Placeholder used instead of the content of an oversized file.

    The size is the decoded length in kilobytes, rounded half up.

    Example:
        >>> format_size_placeholder(100_001)
        '[File too large - 98KB]'
    """
    return f"[File too large - {math.floor(character_count / 1024 + 0.5)}KB]"


def format_error_placeholder(error: BaseException) -> str:
    """Placeholder used instead of the content of a file that could not be read.

    Example:
        >>> format_error_placeholder(PermissionError("Permission denied"))
        '[Error reading file: Permission denied]'
    """
    return f"[Error reading file: {error}]"


class FileContentReader:
    """Reads the text content of the files of a snapshot tree.

    Files are decoded with the configured encoding and error handler, with
    newlines preserved exactly as stored. Content longer than
    ``max_characters`` decoded characters is replaced by a size placeholder;
    any failure to read a file is replaced by an error placeholder. Only regular
    files (after following symbolic links) are read, so special files such as
    FIFOs never block a snapshot.

    Attributes:
        encoding (str): The encoding to use when reading files.
        errors (str): How to handle encoding errors when reading files.
        max_characters (int): Largest decoded length emitted verbatim.

    Example:
        >>> reader = FileContentReader()
        >>> reader.read("/nonexistent/file.txt")  # doctest: +ELLIPSIS
        "[Error reading file: [Errno 2] No such file or directory: '/nonexistent/file.txt']"
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        errors: str = "strict",
        max_characters: int = DEFAULT_MAX_CHARACTERS,
    ) -> None:
        """Initialize the FileContentReader.

        Args:
            encoding: The encoding to use when reading files. Defaults to "utf-8".
            errors: How to handle encoding errors. Must be one of "strict" (the file
                is reported as unreadable), "ignore" (skips invalid bytes), or
                "replace" (replaces invalid bytes with a replacement marker).
                Defaults to "strict".
            max_characters: Largest decoded length emitted verbatim. Defaults to 100,000.

        Raises:
            ValueError: If errors is not one of "strict", "ignore", or "replace", or
                if max_characters is negative.
            LookupError: If the specified encoding is not available.
        """
        if errors not in ("strict", "ignore", "replace"):
            raise ValueError(f"Invalid error handler '{errors}'. Must be one of: strict, ignore, replace")

        if max_characters < 0:
            raise ValueError(f"max_characters must not be negative, got {max_characters}")

        # Validate encoding early to fail fast
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.encoding = encoding
        self.errors = errors
        self.max_characters = max_characters

    def read(self, file_path: PathType) -> str:
        """Read one file, substituting a placeholder when it is oversized or unreadable.

        Args:
            file_path: Path of the file to read.

        Returns:
            str: The file's content, or a bracketed placeholder.
        """
        try:
            mode = os.stat(file_path).st_mode
            if not stat.S_ISREG(mode):
                raise OSError(f"Not a regular file: {display_name(os.fspath(file_path))}")

            with open(file_path, "r", encoding=self.encoding, errors=self.errors, newline="") as file:
                content = file.read()
        except (OSError, UnicodeError) as e:
            return format_error_placeholder(e)

        if len(content) > self.max_characters:
            return format_size_placeholder(len(content))
        return content

    def yield_file_contents(self, fs_tree: FileSystemTree) -> Iterator[Tuple[str, str, str]]:
        """Read every file of a tree in display order.

        Args:
            fs_tree: The tree whose files are read.

        Yields:
            Tuples of (absolute_path, relative_path, content).
        """
        for file_path, relative_path in fs_tree.iterate_files():
            yield file_path, relative_path, self.read(file_path)
