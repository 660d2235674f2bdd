"""Location of the project root directory."""

from pathlib import Path
from typing import Sequence

from dirsnap.types import PathType

PROJECT_MARKERS = (".git", "pyproject.toml", "setup.py", "setup.cfg", "package.json")


def find_project_root(start: PathType, markers: Sequence[str] = PROJECT_MARKERS) -> Path:
    """Find the nearest directory at or above ``start`` containing a project marker.

    Args:
        start: Directory to start searching from.
        markers: File or directory names identifying a project root.

    Returns:
        Path: The resolved project root, or ``start`` itself (resolved) when no
        ancestor contains a marker.

    Example:
        >>> find_project_root("/path/to/project/src/pkg")  # doctest: +SKIP
        PosixPath('/path/to/project')
    """
    start_path = Path(start).resolve()
    for candidate in (start_path, *start_path.parents):
        if any((candidate / marker).exists() for marker in markers):
            return candidate
    return start_path
