"""Tests for the fixed-separator splitter."""

import pytest

from textsplit.text_processing.exceptions import ConfigValidationError
from textsplit.text_processing.strategies.character_splitter import CharacterTextSplitter, split_on_separator


class TestSplitOnSeparator:
    def test_literal_separator(self) -> None:
        assert split_on_separator("a.b..c", ".") == ["a", "b", "", "c"]

    def test_empty_separator_splits_characters(self) -> None:
        assert split_on_separator("abc", "") == ["a", "b", "c"]

    def test_separator_is_not_a_pattern(self) -> None:
        assert split_on_separator("a.b", ".*") == ["a.b"]


class TestCharacterTextSplitter:
    """Splitting once on a configured separator."""

    def test_default_separator_is_paragraph_break(self) -> None:
        splitter = CharacterTextSplitter(chunk_size=6, chunk_overlap=0)

        assert splitter.separator == "\n\n"
        assert splitter.split_text("p1\n\np2\n\np3") == ["p1\n\np2", "p3"]

    def test_space_separator(self) -> None:
        splitter = CharacterTextSplitter(separator=" ", chunk_size=10, chunk_overlap=0)

        assert splitter.split_text("aaaa bbbb cccc dddd") == ["aaaa bbbb", "cccc dddd"]

    def test_empty_separator_splits_into_characters(self) -> None:
        splitter = CharacterTextSplitter(separator="", chunk_size=4, chunk_overlap=0)

        assert splitter.split_text("abcdefgh") == ["abcd", "efgh"]

    def test_overlap(self) -> None:
        splitter = CharacterTextSplitter(separator=" ", chunk_size=10, chunk_overlap=5)

        assert splitter.split_text("aaaa bbbb cccc dddd") == ["aaaa bbbb", "bbbb cccc", "cccc dddd"]

    def test_empty_text(self) -> None:
        splitter = CharacterTextSplitter(separator=" ", chunk_size=10, chunk_overlap=0)

        assert splitter.split_text("") == []

    def test_repeated_calls_are_deterministic(self) -> None:
        splitter = CharacterTextSplitter(separator=" ", chunk_size=12, chunk_overlap=4)
        text = "ab cd ef gh ij kl mn op qr st uv wx yz"

        assert splitter.split_text(text) == splitter.split_text(text)

    def test_oversized_unit_is_reported_to_callback(self, oversized_events, record_oversized) -> None:
        splitter = CharacterTextSplitter(
            separator=" ", chunk_size=5, chunk_overlap=0, on_oversized_chunk=record_oversized
        )

        assert splitter.split_text("abcdefghij klm") == ["abcdefghij", "klm"]
        assert oversized_events == [(10, 5)]

    def test_invalid_overlap_rejected(self) -> None:
        with pytest.raises(ConfigValidationError):
            CharacterTextSplitter(separator=" ", chunk_size=10, chunk_overlap=10)

    @pytest.mark.asyncio()
    async def test_split_text_async_matches_sync(self) -> None:
        splitter = CharacterTextSplitter(separator=" ", chunk_size=10, chunk_overlap=0)

        assert await splitter.split_text_async("aaaa bbbb cccc dddd") == ["aaaa bbbb", "cccc dddd"]
