"""Shared test configuration and fixtures."""

from collections.abc import Collection, Sequence
from typing import Literal

import pytest


class CharacterTokenizer:
    """Tokenizer mapping every character to its code point.

    Stands in for a tiktoken encoding so token tests need no vocabulary download.
    """

    def __init__(self) -> None:
        self.encode_calls: list[dict] = []

    def encode(
        self,
        text: str,
        *,
        allowed_special: Literal["all"] | Collection[str] = frozenset(),
        disallowed_special: Literal["all"] | Collection[str] = "all",
    ) -> list[int]:
        self.encode_calls.append(
            {"text": text, "allowed_special": allowed_special, "disallowed_special": disallowed_special}
        )
        return [ord(c) for c in text]

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(chr(t) for t in tokens)


@pytest.fixture()
def char_tokenizer() -> CharacterTokenizer:
    return CharacterTokenizer()


@pytest.fixture()
def oversized_events() -> list[tuple[int, int]]:
    """Collects (chunk_length, chunk_size) pairs reported for oversized chunks."""
    return []


@pytest.fixture()
def record_oversized(oversized_events):
    def _record(total: int, chunk_size: int) -> None:
        oversized_events.append((total, chunk_size))

    return _record
