"""Tests for custom exceptions."""

from pathlib import Path

from dirsnap.exceptions import SnapshotWriteError


class TestSnapshotWriteError:
    """Test SnapshotWriteError exception."""

    def test_creation(self):
        error = SnapshotWriteError("/tmp/snapshots/snap.md", "disk full")

        assert error.path == "/tmp/snapshots/snap.md"
        assert error.reason == "disk full"
        assert str(error) == "Failed to write snapshot /tmp/snapshots/snap.md: disk full"

    def test_from_exception(self):
        cause = OSError(28, "No space left on device")
        error = SnapshotWriteError(Path("/tmp/snap.md"), cause)

        assert error.path == "/tmp/snap.md"
        assert error.reason == "[Errno 28] No space left on device"
        assert isinstance(error, Exception)
