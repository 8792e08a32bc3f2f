#!/usr/bin/env python3
"""
Fixed-separator text splitter.

Splits once on a single configured separator and merges the pieces back into
size-bounded chunks.
"""

from typing import Any

from textsplit.text_processing.base_splitter import BaseTextSplitter


def split_on_separator(text: str, separator: str) -> list[str]:
    """Split on every literal occurrence of separator, or per character when it is empty."""
    if separator:
        return text.split(separator)
    return list(text)


class CharacterTextSplitter(BaseTextSplitter):
    """Split text on a single literal separator."""

    strategy_name = "character"

    def __init__(self, separator: str = "\n\n", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.separator = separator

    def _split_text(self, text: str) -> list[str]:
        # First we naively split the large input into a bunch of smaller ones.
        splits = split_on_separator(text, self.separator)
        return self.merge_splits(splits, self.separator)
