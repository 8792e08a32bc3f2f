#!/usr/bin/env python3
"""
Token-window text splitter.

Slides a fixed-size window over the token ids of the text instead of looking
for separators, so chunk boundaries fall on token positions.
"""

import logging
from collections.abc import Collection
from typing import Any, Literal

from textsplit.text_processing import tokenizers
from textsplit.text_processing.base_splitter import BaseTextSplitter
from textsplit.text_processing.tokenizers import Tokenizer

logger = logging.getLogger(__name__)


class TokenTextSplitter(BaseTextSplitter):
    """
    Split text into overlapping windows of ``chunk_size`` tokens.

    Consecutive windows share ``chunk_overlap`` tokens. The tokenizer is
    loaded on the first split and reused for the lifetime of the splitter.
    """

    strategy_name = "token"

    def __init__(
        self,
        encoding_name: str = "gpt2",
        allowed_special: Literal["all"] | Collection[str] | None = None,
        disallowed_special: Literal["all"] | Collection[str] = "all",
        tokenizer: Tokenizer | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the token splitter.

        Args:
            encoding_name: tiktoken encoding to load lazily
            allowed_special: Special tokens encoded as such, or "all"
            disallowed_special: Special tokens that raise when found in text, or "all"
            tokenizer: Ready tokenizer to use instead of loading encoding_name
            **kwargs: Size configuration passed to BaseTextSplitter
        """
        super().__init__(**kwargs)
        self.encoding_name = encoding_name
        self.allowed_special = allowed_special if allowed_special is not None else set()
        self.disallowed_special = disallowed_special
        self._tokenizer = tokenizer

    @property
    def tokenizer(self) -> Tokenizer:
        """The tokenizer, loading it on first access."""
        if self._tokenizer is None:
            self._tokenizer = tokenizers.get_encoding(self.encoding_name)
        return self._tokenizer

    async def load_tokenizer_async(self) -> Tokenizer:
        """Load the tokenizer off the event loop if it is not loaded yet."""
        if self._tokenizer is None:
            self._tokenizer = await tokenizers.get_encoding_async(self.encoding_name)
        return self._tokenizer

    async def split_text_async(self, text: str) -> list[str]:
        await self.load_tokenizer_async()
        return await super().split_text_async(text)

    def _split_text(self, text: str) -> list[str]:
        tokenizer = self.tokenizer
        input_ids = tokenizer.encode(
            text,
            allowed_special=self.allowed_special,
            disallowed_special=self.disallowed_special,
        )
        total_tokens = len(input_ids)
        step = self.config.chunk_size - self.config.chunk_overlap

        splits: list[str] = []
        start_idx = 0
        while start_idx < total_tokens:
            cur_idx = min(start_idx + self.config.chunk_size, total_tokens)
            splits.append(tokenizer.decode(input_ids[start_idx:cur_idx]))
            # A later window would only repeat tokens already emitted
            if cur_idx == total_tokens:
                break
            start_idx += step

        logger.debug(f"Split {total_tokens} tokens into {len(splits)} windows")
        return splits
