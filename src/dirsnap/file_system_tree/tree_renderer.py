"""ASCII-art rendering of a file system tree."""

from anytree import ContStyle, RenderTree

from dirsnap.file_system_tree.file_system_node import FileSystemNode


def render_tree(root: FileSystemNode) -> str:
    """Render the descendants of ``root`` using box-drawing connectors.

    Every child except the last one of its parent is prefixed with ``├── ``, the
    last one with ``└── ``. Descendants of a child are indented by ``│   `` when
    that child was not the last one and by four spaces when it was. Children are
    rendered in the order they are attached to their parent.

    The root's own name is not part of the output; callers print it above.

    Args:
        root: Root node of the tree.

    Returns:
        str: One line per descendant, each terminated by a newline. Empty if the
        root has no children.

    Example:
        >>> from pathlib import Path
        >>> from dirsnap.types import EntryKind
        >>> root = FileSystemNode("proj", Path("/proj"), EntryKind.DIRECTORY)
        >>> src = FileSystemNode("src", Path("/proj/src"), EntryKind.DIRECTORY, parent=root)
        >>> _ = FileSystemNode("main.py", Path("/proj/src/main.py"), parent=src)
        >>> _ = FileSystemNode("README.md", Path("/proj/README.md"), parent=root)
        >>> print(render_tree(root), end="")
        ├── src
        │   └── main.py
        └── README.md
    """
    rows = iter(RenderTree(root, style=ContStyle()))
    next(rows)  # the root itself
    return "".join(f"{row.pre}{row.node.name}\n" for row in rows)
