"""Integration tests for the command-line interface.

These tests run dirsnap in a subprocess against a real project directory and
cover:
- Default snapshot location and naming
- .gitignore handling and extra exclusion rules
- Standard output mode
- Exit codes for invalid input
"""

import re
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)

SNAPSHOT_NAME = re.compile(r"snap-(Mon|Tue|Wed|Thu|Fri|Sat|Sun)-\d{2}-\d{2}-\d{4}--\d{1,2}-\d{2}-(am|pm)\.md")


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "sample_project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "node_modules" / "left-pad").mkdir(parents=True)

    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "node_modules" / "left-pad" / "index.js").write_text("module.exports = {}\n")
    (base_dir / "server.log").write_text("DEBUG: test log\n")
    (base_dir / "package.json").write_text('{"name": "sample"}\n')
    (base_dir / ".gitignore").write_text("node_modules\n*.log\n")
    return base_dir.resolve()


def run_dirsnap(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "dirsnap.cli.main", *map(str, args)],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
    )


def test_default_snapshot(temp_project):
    result = run_dirsnap(temp_project)
    assert result.returncode == 0, result.stderr

    snapshots = list((temp_project / "snapshots").glob("*/*.md"))
    assert len(snapshots) == 1
    snapshot = snapshots[0]
    assert SNAPSHOT_NAME.fullmatch(snapshot.name)
    assert snapshot.name.startswith(f"snap-{snapshot.parent.name}--")

    document = snapshot.read_text(encoding="utf-8")
    assert document.startswith("# Sample Project\n\n**Snapshot Date:** ")
    assert "sample_project\n├── src\n│   ├── utils\n│   │   └── helpers.py\n│   └── main.py\n" in document
    assert "node_modules" not in document
    assert "server.log" not in document
    assert f"Snapshot saved to: {snapshot}" in result.stderr


def test_discovers_project_root(temp_project):
    result = run_dirsnap("--stdout", cwd=temp_project / "src" / "utils")
    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("# Sample Project\n")
    assert f"Project root: {temp_project}" in result.stderr


def test_stdout_with_extra_rules(temp_project):
    result = run_dirsnap("--stdout", "-q", "--no-gitignore", "-i", "node_modules", "-i", "utils", temp_project)
    assert result.returncode == 0, result.stderr
    assert result.stderr == ""
    assert "### server.log" in result.stdout
    assert "helpers.py" not in result.stdout
    assert "index.js" not in result.stdout
    assert not (temp_project / "snapshots").exists()


def test_version():
    result = run_dirsnap("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("dirsnap ")


def test_missing_directory(tmp_path):
    result = run_dirsnap(tmp_path / "missing")
    assert result.returncode == 1
    assert result.stderr.startswith("Creating snapshot...")
    assert "Error: Root path does not exist" in result.stderr
    assert not Path(tmp_path / "missing").exists()


def test_invalid_option():
    result = run_dirsnap("--bogus")
    assert result.returncode == 2
