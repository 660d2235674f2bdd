"""Tests for the SnapshotBuilder class."""

import os
from datetime import datetime

import pytest

from dirsnap.exclusion_rules.matcher import compile_matcher
from dirsnap.file_content_reader import FileContentReader
from dirsnap.snapshot_builder import SnapshotBuilder, format_project_title
from dirsnap.snapshot_writer import SnapshotWriter

NOW = datetime(2025, 11, 22, 17, 5)


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "my-cool_project"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "README.md").write_text("# Readme")
    return root.resolve()


def test_complete_document(project):
    document = SnapshotBuilder(project).build(NOW)

    expected = (
        "# My Cool Project\n"
        "\n"
        "**Snapshot Date:** Sat, November 22, 2025 @ 5:05pm\n"
        "\n"
        "---\n"
        "\n"
        "## File Tree\n"
        "\n"
        "```\n"
        "my-cool_project\n"
        "├── src\n"
        "│   └── main.py\n"
        "└── README.md\n"
        "```\n"
        "\n"
        "---\n"
        "\n"
        "## File Contents\n"
        "\n"
        "### src/main.py\n"
        "\n"
        "```\n"
        "print('hi')\n"
        "\n"
        "```\n"
        "\n"
        "### README.md\n"
        "\n"
        "```\n"
        "# Readme\n"
        "```\n"
        "\n"
    )
    assert document == expected


def test_build_is_deterministic(project):
    builder = SnapshotBuilder(project)
    assert builder.build(NOW) == builder.build(NOW)


def test_tree_and_contents_agree(project):
    (project / "src" / "lib").mkdir()
    (project / "src" / "lib" / "util.py").write_text("util")
    (project / "setup.cfg").write_text("[metadata]")

    document = SnapshotBuilder(project).build(NOW)
    headings = [line[4:] for line in document.splitlines() if line.startswith("### ")]

    assert headings == ["src/lib/util.py", "src/main.py", "README.md", "setup.cfg"]


def test_snapshot_directory_is_excluded(project):
    (project / "snapshots" / "Sat-11-22-2025").mkdir(parents=True)
    (project / "snapshots" / "Sat-11-22-2025" / "snap.md").write_text("old snapshot")

    document = SnapshotBuilder(project).build(NOW)

    assert "snapshots" not in document
    assert "old snapshot" not in document


def test_user_rules_are_applied(project):
    (project / "debug.log").write_text("noise")
    (project / "node_modules" / "pkg").mkdir(parents=True)
    (project / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}")

    rules = compile_matcher(["*.log", "node_modules"])
    document = SnapshotBuilder(project, exclusion_rules=rules).build(NOW)

    assert "debug.log" not in document
    assert "node_modules" not in document
    assert "### README.md" in document


def test_no_rules_includes_every_file(project):
    (project / ".env").write_text("SECRET=1")
    document = SnapshotBuilder(project).build(NOW)
    assert "### .env" in document
    assert "SECRET=1" in document


def test_empty_directory_only_in_tree(project):
    (project / "empty").mkdir()
    document = SnapshotBuilder(project).build(NOW)
    assert "├── empty\n" in document
    assert "### empty" not in document


def test_oversized_file_placeholder(project):
    (project / "big.txt").write_text("x" * 100_001)
    document = SnapshotBuilder(project).build(NOW)
    assert "### big.txt\n\n```\n[File too large - 98KB]\n```\n\n" in document


def test_unreadable_file_does_not_abort(project):
    (project / "blob.bin").write_bytes(b"\xff\xfe\x00\x80")
    document = SnapshotBuilder(project).build(NOW)

    assert "### blob.bin\n\n```\n[Error reading file: " in document
    # Later files are still emitted
    assert "### README.md\n\n```\n# Readme\n```\n\n" in document


def test_custom_content_reader(project):
    (project / "blob.bin").write_bytes(b"ok\xff")
    builder = SnapshotBuilder(project, content_reader=FileContentReader(errors="replace"))
    assert "ok�" in builder.build(NOW)


def test_empty_project(tmp_path):
    root = tmp_path / "empty_project"
    root.mkdir()
    document = SnapshotBuilder(root).build(NOW)

    assert document.startswith("# Empty Project\n\n")
    assert "## File Tree\n\n```\nempty_project\n```\n\n---\n\n## File Contents\n\n" in document
    assert document.endswith("## File Contents\n\n")


def test_counts(project):
    builder = SnapshotBuilder(project)
    assert builder.directory_count is None
    assert builder.file_count is None

    builder.build(NOW)

    assert builder.directory_count == 1
    assert builder.file_count == 2


def test_counts_follow_latest_build(project):
    builder = SnapshotBuilder(project)
    builder.build(NOW)
    (project / "docs").mkdir()
    (project / "docs" / "guide.md").write_text("guide")

    builder.build(NOW)

    assert builder.directory_count == 2
    assert builder.file_count == 3


def test_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        SnapshotBuilder(tmp_path / "missing").build(NOW)


def test_root_is_file(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("content")
    with pytest.raises(NotADirectoryError):
        SnapshotBuilder(path).build(NOW)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("my-cool_project", "My Cool Project"),
        ("dirsnap", "Dirsnap"),
        ("HELLO-world", "Hello World"),
        ("a--b", "A  B"),
        ("trailing-", "Trailing "),
    ],
)
def test_format_project_title(name, expected):
    assert format_project_title(name) == expected


def test_undecodable_file_name_is_written(project, tmp_path):
    try:
        with open(os.path.join(os.fsencode(project), b"bad\xff.txt"), "wb") as f:
            f.write(b"raw bytes")
    except (OSError, ValueError):
        pytest.skip("Filesystem does not accept undecodable file names")

    document = SnapshotBuilder(project).build(NOW)
    assert "### bad�.txt\n\n```\nraw bytes\n```\n\n" in document

    path = SnapshotWriter(tmp_path / "out").write(document, NOW)
    assert path.read_text(encoding="utf-8") == document
    assert os.listdir(path.parent) == [path.name]


def test_symlink_count(project):
    try:
        os.symlink(project / "README.md", project / "README.link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    builder = SnapshotBuilder(project)
    assert builder.symlink_count is None
    builder.build(NOW)

    assert builder.symlink_count == 1
    assert builder.file_count == 3
