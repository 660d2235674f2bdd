from typing import Union

from dirsnap.types import PathType


class SnapshotWriteError(Exception):
    """
    Exception raised when a finished snapshot document cannot be persisted.

    Nothing is left on disk when this is raised: the document is written to a
    temporary file first and only moved into place once the write succeeded.

    Attributes:
        path (str): Destination path of the snapshot that could not be written.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = SnapshotWriteError("/tmp/snapshots/snap.md", "disk full")
        >>> str(error)
        'Failed to write snapshot /tmp/snapshots/snap.md: disk full'
    """

    def __init__(self, path: PathType, reason: Union[str, Exception]) -> None:
        """
        Initialize the exception with the destination path and failure reason.

        Args:
            path: Destination path of the snapshot.
            reason: Description of the failure, or the exception that caused it.
        """
        self.path = str(path)
        self.reason = str(reason)
        super().__init__(f"Failed to write snapshot {self.path}: {self.reason}")
