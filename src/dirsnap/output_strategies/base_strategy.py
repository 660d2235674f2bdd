"""Output strategy base class defining the interface for snapshot document formatting.

This module provides the abstract base class that defines how the sections of a
snapshot document are formatted. A document is assembled from the following
pieces, in order:

1. Header - project title and snapshot timestamp
2. Tree - root name and rendered tree
3. Contents heading - opens the file contents section
4. For every file: start, content, end
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class defining the interface for snapshot document formatting strategies.

    Each method returns a string fragment; concatenating the fragments in the
    order listed in the module documentation yields the complete document.
    Implementations must be pure: the same arguments always produce the same
    fragment.
    """

    @abstractmethod
    def format_header(self, title: str, timestamp: str) -> str:
        """Format the document header.

        Args:
            title: Human-readable project title.
            timestamp: Human-readable snapshot timestamp.

        Returns:
            The formatted header.
        """
        pass

    @abstractmethod
    def format_tree(self, root_name: str, tree_text: str) -> str:
        """Format the tree section.

        Args:
            root_name: Name of the project root directory.
            tree_text: Rendered tree, one newline-terminated line per entry.

        Returns:
            The formatted tree section.
        """
        pass

    @abstractmethod
    def format_contents_heading(self) -> str:
        """Format the heading that opens the file contents section."""
        pass

    @abstractmethod
    def format_start(self, relative_path: str) -> str:
        """Format the opening wrapper for one file's content.

        Args:
            relative_path: Path of the file relative to the project root.
        """
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        """Format one file's content (or its placeholder)."""
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper for one file's content."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".md").
        """
        pass
