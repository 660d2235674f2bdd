"""Output strategies for snapshot documents."""

from .base_strategy import OutputStrategy
from .markdown_strategy import MarkdownOutputStrategy

__all__ = ["MarkdownOutputStrategy", "OutputStrategy"]
