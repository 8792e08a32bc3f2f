#!/usr/bin/env python3
"""
Markdown-aware recursive text splitter.
"""

from collections.abc import Sequence
from typing import Any

from textsplit.text_processing.strategies.recursive_splitter import RecursiveCharacterTextSplitter

MARKDOWN_SEPARATORS = (
    # First, try to split along Markdown headings (starting with level 2)
    "\n## ",
    "\n### ",
    "\n#### ",
    "\n##### ",
    "\n###### ",
    # Setext headings (underlined with === or ---) are not handled here
    # End of code block
    "```\n\n",
    # Horizontal lines; only the three-character forms are recognised
    "\n\n***\n\n",
    "\n\n---\n\n",
    "\n\n___\n\n",
    "\n\n",
    "\n",
    " ",
    "",
)


class MarkdownTextSplitter(RecursiveCharacterTextSplitter):
    """Recursive splitter preferring Markdown section boundaries."""

    strategy_name = "markdown"

    def __init__(self, separators: Sequence[str] | None = None, **kwargs: Any) -> None:
        super().__init__(separators=separators if separators is not None else MARKDOWN_SEPARATORS, **kwargs)
