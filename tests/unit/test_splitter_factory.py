"""Tests for creating splitters from configuration dicts."""

import pytest

from textsplit.config import settings
from textsplit.text_processing.base_splitter import BaseTextSplitter
from textsplit.text_processing.exceptions import ChunkerCreationError, ConfigValidationError, UnknownStrategyError
from textsplit.text_processing.splitter_factory import SplitterFactory
from textsplit.text_processing.strategies import (
    CharacterTextSplitter,
    MarkdownTextSplitter,
    RecursiveCharacterTextSplitter,
    TokenTextSplitter,
)


class ReversingSplitter(BaseTextSplitter):
    strategy_name = "reversing"

    def _split_text(self, text: str) -> list[str]:
        return [text[::-1]] if text else []


class TestSplitterFactory:
    """Strategy lookup and parameter defaults."""

    @pytest.mark.parametrize(
        ("strategy", "expected_class"),
        [
            ("character", CharacterTextSplitter),
            ("recursive", RecursiveCharacterTextSplitter),
            ("markdown", MarkdownTextSplitter),
            ("token", TokenTextSplitter),
        ],
    )
    def test_creates_builtin_strategies(self, strategy: str, expected_class: type) -> None:
        splitter = SplitterFactory.create_splitter({"strategy": strategy, "params": {"chunk_size": 50, "chunk_overlap": 5}})

        assert type(splitter) is expected_class
        assert splitter.chunk_size == 50
        assert splitter.chunk_overlap == 5

    def test_defaults_come_from_settings(self) -> None:
        splitter = SplitterFactory.create_splitter({"strategy": "token"})

        assert splitter.chunk_size == settings.DEFAULT_CHUNK_SIZE
        assert splitter.chunk_overlap == settings.DEFAULT_CHUNK_OVERLAP
        assert splitter.encoding_name == settings.DEFAULT_ENCODING_NAME

    def test_strategy_params_are_forwarded(self) -> None:
        splitter = SplitterFactory.create_splitter(
            {"strategy": "character", "params": {"separator": " ", "chunk_size": 10, "chunk_overlap": 0}}
        )

        assert splitter.split_text("aaaa bbbb cccc dddd") == ["aaaa bbbb", "cccc dddd"]

    def test_params_dict_is_not_mutated(self) -> None:
        params = {"chunk_size": 10, "chunk_overlap": 0}

        SplitterFactory.create_splitter({"strategy": "recursive", "params": params})

        assert params == {"chunk_size": 10, "chunk_overlap": 0}

    def test_missing_strategy(self) -> None:
        with pytest.raises(ChunkerCreationError, match="strategy"):
            SplitterFactory.create_splitter({})

    def test_unknown_strategy(self) -> None:
        with pytest.raises(UnknownStrategyError, match="semantic") as exc_info:
            SplitterFactory.create_splitter({"strategy": "semantic"})

        assert isinstance(exc_info.value, ValueError)
        assert "recursive" in exc_info.value.details["available"]

    def test_unexpected_param(self) -> None:
        with pytest.raises(ChunkerCreationError, match="Invalid parameters"):
            SplitterFactory.create_splitter({"strategy": "character", "params": {"bogus": True}})

    def test_invalid_sizes_propagate(self) -> None:
        with pytest.raises(ConfigValidationError):
            SplitterFactory.create_splitter({"strategy": "recursive", "params": {"chunk_size": 10, "chunk_overlap": 20}})

    def test_available_strategies(self) -> None:
        assert {"character", "recursive", "markdown", "token"} <= set(SplitterFactory.get_available_strategies())

    def test_register_strategy(self) -> None:
        SplitterFactory.register_strategy("reversing", ReversingSplitter)
        try:
            splitter = SplitterFactory.create_splitter({"strategy": "reversing", "params": {"chunk_size": 10, "chunk_overlap": 0}})

            assert splitter.split_text("abc") == ["cba"]
            assert "character" in SplitterFactory.get_available_strategies()
        finally:
            SplitterFactory._strategies.pop("reversing", None)
