"""Persistence of snapshot documents.

Snapshots are stored as ``<output_dir>/<Ddd-MM-DD-YYYY>/snap-<Ddd-MM-DD-YYYY>--<h>-<mm>-<am|pm>.md``.
A document is written to a temporary file next to its destination and renamed
into place once complete, so an interrupted or failed write never leaves a
partial snapshot behind.
"""

import os
import tempfile
from datetime import datetime
from pathlib import Path

from dirsnap.exceptions import SnapshotWriteError
from dirsnap.timestamps import format_date_folder, format_snapshot_filename
from dirsnap.types import PathType


def current_umask() -> int:
    """Return the process umask without changing it."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


class SnapshotWriter:
    """Writes snapshot documents into a date-organized output directory.

    Attributes:
        output_dir (Path): Directory holding the per-day snapshot folders.

    Example:
        >>> writer = SnapshotWriter("/path/to/project/snapshots")  # doctest: +SKIP
        >>> writer.write("# Project\\n", datetime(2025, 11, 22, 5, 55))  # doctest: +SKIP
        PosixPath('/path/to/project/snapshots/Sat-11-22-2025/snap-Sat-11-22-2025--5-55-am.md')
    """

    def __init__(self, output_dir: PathType) -> None:
        self.output_dir = Path(output_dir)

    def prepare(self) -> None:
        """Create the output directory, so that it already exists when the project is walked.

        Raises:
            SnapshotWriteError: If the directory cannot be created.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SnapshotWriteError(self.output_dir, e) from e

    def destination(self, now: datetime, extension: str = ".md") -> Path:
        """Path the snapshot taken at ``now`` is written to."""
        return self.output_dir / format_date_folder(now) / format_snapshot_filename(now, extension)

    def write(self, document: str, now: datetime, extension: str = ".md") -> Path:
        """Write a complete document, creating missing directories.

        An existing snapshot with the same name (same minute) is replaced. The
        file gets the permissions of a newly created file under the current
        umask. Characters that cannot be encoded as UTF-8 (such as undecodable
        bytes in file names) are written as ``?``.

        Args:
            document: The complete document text.
            now: The instant the snapshot was taken at.
            extension: Filename extension, including the leading dot.

        Returns:
            Path: The path of the written snapshot.

        Raises:
            SnapshotWriteError: If the directories cannot be created or the file
                cannot be written. Nothing is left at the destination in that case.
        """
        path = self.destination(now, extension)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SnapshotWriteError(path, e) from e

        temp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                errors="replace",
                newline="\n",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_name = temp_file.name
                temp_file.write(document)
            os.chmod(temp_name, 0o666 & ~current_umask())
            os.replace(temp_name, path)
        except BaseException as e:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            if isinstance(e, OSError):
                raise SnapshotWriteError(path, e) from e
            raise

        return path
