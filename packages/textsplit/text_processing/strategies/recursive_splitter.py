#!/usr/bin/env python3
"""
Recursive separator-fallback text splitter.

This module splits text using a priority-ordered list of separators,
preferring the most meaningful boundary present in the text and falling back
to finer separators for pieces that are still too large.
"""

import logging
from collections.abc import Sequence
from typing import Any

from textsplit.text_processing.base_splitter import BaseTextSplitter
from textsplit.text_processing.exceptions import ConfigValidationError
from textsplit.text_processing.strategies.character_splitter import split_on_separator

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = ("\n\n", "\n", " ", "")


class RecursiveCharacterTextSplitter(BaseTextSplitter):
    """
    Recursively split text on a hierarchy of separators.

    The first separator found in the text is used; pieces that are still at
    least ``chunk_size`` long are split again with the same separator list,
    which then picks a finer separator. Ending the list with ``""`` guarantees
    every piece can be reduced to single characters.
    """

    strategy_name = "recursive"

    def __init__(self, separators: Sequence[str] | None = None, **kwargs: Any) -> None:
        """
        Initialize the recursive splitter.

        Args:
            separators: Separators from most to least preferred
            **kwargs: Size configuration passed to BaseTextSplitter
        """
        super().__init__(**kwargs)
        self.separators = list(separators) if separators is not None else list(DEFAULT_SEPARATORS)
        if not self.separators:
            raise ConfigValidationError("separators must contain at least one entry", {"separators": []})

    def _select_separator(self, text: str) -> str:
        for s in self.separators:
            if s == "" or s in text:
                return s
        return self.separators[-1]

    def _split_text(self, text: str) -> list[str]:
        final_chunks: list[str] = []

        separator = self._select_separator(text)
        splits = split_on_separator(text, separator)

        # Now go merging things, recursively splitting longer texts.
        good_splits: list[str] = []
        for s in splits:
            if len(s) < self.config.chunk_size:
                good_splits.append(s)
                continue

            if good_splits:
                final_chunks.extend(self.merge_splits(good_splits, separator))
                good_splits = []

            if s == text:
                # No separator can break this piece any further
                logger.debug(f"Cannot split piece of length {len(s)} with separator {separator!r}")
                final_chunks.extend(self.merge_splits([s], separator))
            else:
                final_chunks.extend(self._split_text(s))

        if good_splits:
            final_chunks.extend(self.merge_splits(good_splits, separator))

        return final_chunks
