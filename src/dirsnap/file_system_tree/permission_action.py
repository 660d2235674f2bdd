"""Permission action enum for handling unlistable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory below the root cannot be listed.

    The root directory itself is always fatal when it cannot be listed.

    Values:
        RAISE: Abort the traversal with a PermissionError naming the directory (default)
        IGNORE: Keep the directory in the tree, without children
    """

    RAISE = "raise"
    IGNORE = "ignore"
