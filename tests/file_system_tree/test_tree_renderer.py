"""Unit tests for the tree renderer."""

from pathlib import Path

from dirsnap.file_system_tree.file_system_node import FileSystemNode
from dirsnap.file_system_tree.tree_renderer import render_tree
from dirsnap.types import EntryKind


def directory(name, parent=None):
    return FileSystemNode(name, Path("/") / name, EntryKind.DIRECTORY, parent=parent)


def file(name, parent):
    return FileSystemNode(name, Path("/") / name, EntryKind.FILE, parent=parent)


def test_render_empty_root():
    assert render_tree(directory("proj")) == ""


def test_render_flat():
    root = directory("proj")
    for name in ["a", "b", "c"]:
        file(name, root)
    assert render_tree(root) == "├── a\n├── b\n└── c\n"


def test_render_nested_non_last_directory():
    root = directory("proj")
    src = directory("src", root)
    lib = directory("lib", src)
    file("x.py", lib)
    file("main.py", src)
    file("README.md", root)

    expected = "├── src\n" "│   ├── lib\n" "│   │   └── x.py\n" "│   └── main.py\n" "└── README.md\n"
    assert render_tree(root) == expected


def test_render_nested_last_directory():
    root = directory("proj")
    file("a.txt", root)
    docs = directory("docs", root)
    api = directory("api", docs)
    file("index.md", api)
    file("guide.md", docs)

    expected = "├── a.txt\n" "└── docs\n" "    ├── api\n" "    │   └── index.md\n" "    └── guide.md\n"
    assert render_tree(root) == expected


def test_render_empty_directory():
    root = directory("proj")
    directory("empty", root)
    file("z.txt", root)
    assert render_tree(root) == "├── empty\n└── z.txt\n"


def test_render_keeps_attachment_order():
    root = directory("proj")
    file("z", root)
    file("a", root)
    assert render_tree(root) == "├── z\n└── a\n"


def test_render_deep_tree():
    root = directory("proj")
    node = root
    for depth in range(50):
        node = directory(f"d{depth}", node)
    lines = render_tree(root).splitlines()
    assert len(lines) == 50
    assert lines[0] == "└── d0"
    assert lines[-1] == "    " * 49 + "└── d49"
