#!/usr/bin/env python3
"""
Factory for creating text splitters.

This module provides a factory pattern for instantiating different splitting
strategies based on configuration.
"""

import logging
from typing import Any

from textsplit.config import settings
from textsplit.text_processing.base_splitter import BaseTextSplitter
from textsplit.text_processing.exceptions import ChunkerCreationError, UnknownStrategyError

logger = logging.getLogger(__name__)


class SplitterFactory:
    """Factory for creating splitting strategies."""

    # Registry of available strategies
    _strategies: dict[str, type[BaseTextSplitter]] = {}

    @classmethod
    def register_strategy(cls, name: str, strategy_class: type[BaseTextSplitter]) -> None:
        """Register a splitting strategy.

        Args:
            name: Name of the strategy
            strategy_class: Class implementing BaseTextSplitter
        """
        if not cls._strategies:
            cls._initialize_strategies()
        cls._strategies[name] = strategy_class

    @classmethod
    def create_splitter(cls, config: dict[str, Any]) -> BaseTextSplitter:
        """Create appropriate splitter based on configuration.

        Args:
            config: Configuration dictionary with 'strategy' and optional 'params'

        Returns:
            Instance of the requested splitting strategy

        Raises:
            ChunkerCreationError: If no strategy is given or the params are not accepted
            UnknownStrategyError: If unknown strategy is requested
            ConfigValidationError: If the size configuration is invalid
        """
        strategy = config.get("strategy")
        if not strategy:
            raise ChunkerCreationError("Configuration must include 'strategy' field")

        if not cls._strategies:
            cls._initialize_strategies()

        strategy_class = cls._strategies.get(strategy)
        if not strategy_class:
            raise UnknownStrategyError(
                f"Unknown splitting strategy: {strategy}",
                {"strategy": strategy, "available": sorted(cls._strategies)},
            )

        params = dict(config.get("params") or {})
        params.setdefault("chunk_size", settings.DEFAULT_CHUNK_SIZE)
        params.setdefault("chunk_overlap", settings.DEFAULT_CHUNK_OVERLAP)
        if strategy == "token":
            params.setdefault("encoding_name", settings.DEFAULT_ENCODING_NAME)

        logger.info(f"Creating {strategy} splitter")
        try:
            return strategy_class(**params)
        except TypeError as e:
            raise ChunkerCreationError(
                f"Invalid parameters for {strategy} splitter: {e}", {"strategy": strategy, "params": params}
            ) from e

    @classmethod
    def _initialize_strategies(cls) -> None:
        """Initialize the strategy registry with available strategies."""
        # Lazy import strategies to avoid circular imports
        from textsplit.text_processing.strategies.character_splitter import CharacterTextSplitter
        from textsplit.text_processing.strategies.markdown_splitter import MarkdownTextSplitter
        from textsplit.text_processing.strategies.recursive_splitter import RecursiveCharacterTextSplitter
        from textsplit.text_processing.strategies.token_splitter import TokenTextSplitter

        cls._strategies.update(
            {
                "character": CharacterTextSplitter,
                "recursive": RecursiveCharacterTextSplitter,
                "markdown": MarkdownTextSplitter,
                "token": TokenTextSplitter,
            }
        )

    @classmethod
    def get_available_strategies(cls) -> list[str]:
        """Get list of available splitting strategies.

        Returns:
            List of strategy names
        """
        if not cls._strategies:
            cls._initialize_strategies()
        return list(cls._strategies.keys())
