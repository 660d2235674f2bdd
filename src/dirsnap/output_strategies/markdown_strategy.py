"""Markdown output strategy for snapshot documents."""

from .base_strategy import OutputStrategy

FENCE = "```"
SEPARATOR = "---\n\n"


class MarkdownOutputStrategy(OutputStrategy):
    """Output strategy that formats a snapshot as a Markdown document.

    The tree and every file's content are placed in plain fenced code blocks.
    Content is emitted verbatim; it is not escaped.

    Example:
        >>> strategy = MarkdownOutputStrategy()
        >>> print(strategy.format_header("My Project", "Sat, November 22, 2025 @ 5:55am"), end="")
        # My Project
        <BLANKLINE>
        **Snapshot Date:** Sat, November 22, 2025 @ 5:55am
        <BLANKLINE>
        ---
        <BLANKLINE>
        >>> print(strategy.format_start("src/main.py") + strategy.format_content("pass") + strategy.format_end(), end="")
        ### src/main.py
        <BLANKLINE>
        ```
        pass
        ```
        <BLANKLINE>
    """

    def format_header(self, title: str, timestamp: str) -> str:
        return f"# {title}\n\n**Snapshot Date:** {timestamp}\n\n{SEPARATOR}"

    def format_tree(self, root_name: str, tree_text: str) -> str:
        return f"## File Tree\n\n{FENCE}\n{root_name}\n{tree_text}{FENCE}\n\n{SEPARATOR}"

    def format_contents_heading(self) -> str:
        return "## File Contents\n\n"

    def format_start(self, relative_path: str) -> str:
        return f"### {relative_path}\n\n{FENCE}\n"

    def format_content(self, content: str) -> str:
        return content

    def format_end(self) -> str:
        return f"\n{FENCE}\n\n"

    def get_file_extension(self) -> str:
        return ".md"
