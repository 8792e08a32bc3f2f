#!/usr/bin/env python3
"""
Tokenizer acquisition for token-based splitting.

Uses tiktoken for BPE encodings. Loading an encoding may download and build
its vocabulary tables on first use, so failures are surfaced as
TokenizerLoadError rather than swallowed.
"""

import asyncio
import logging
from collections.abc import Collection, Sequence
from typing import Literal, Protocol

import tiktoken

from textsplit.text_processing.exceptions import TokenizerLoadError

logger = logging.getLogger(__name__)


class Tokenizer(Protocol):
    """Anything that can turn text into token ids and back."""

    def encode(
        self,
        text: str,
        *,
        allowed_special: Literal["all"] | Collection[str] = ...,
        disallowed_special: Literal["all"] | Collection[str] = ...,
    ) -> list[int]: ...

    def decode(self, tokens: Sequence[int]) -> str: ...


def get_encoding(encoding_name: str) -> tiktoken.Encoding:
    """Load a tiktoken encoding by name.

    Args:
        encoding_name: Encoding identifier such as "gpt2" or "cl100k_base"

    Returns:
        The loaded encoding

    Raises:
        TokenizerLoadError: If the encoding is unknown or cannot be loaded
    """
    try:
        encoding = tiktoken.get_encoding(encoding_name)
    except Exception as e:
        logger.error(f"Failed to load tokenizer encoding {encoding_name}: {e}")
        raise TokenizerLoadError(encoding_name, str(e)) from e

    logger.info(f"Loaded tokenizer encoding: {encoding_name}")
    return encoding


async def get_encoding_async(encoding_name: str) -> tiktoken.Encoding:
    """Load a tiktoken encoding without blocking the event loop."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, get_encoding, encoding_name)
