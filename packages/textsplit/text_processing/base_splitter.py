#!/usr/bin/env python3
"""
Base splitter interface for all text splitting strategies.

This module provides the shared configuration value object and the abstract
base class every splitter implements. Splitters share nothing but their
configuration and, for the separator-based ones, the merge routine.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from textsplit.config import settings
from textsplit.metrics.prometheus import record_oversized_chunk
from textsplit.text_processing.documents import (
    ChunkHeaderOptions,
    Document,
    build_documents,
    resolve_metadatas,
)
from textsplit.text_processing.exceptions import ConfigValidationError, OverlapConfigurationError
from textsplit.text_processing.merge import OversizedChunkCallback, merge_splits
from textsplit.text_processing.splitting_metrics import performance_monitor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitterConfig:
    """
    Immutable size configuration shared by all splitters.

    ``chunk_overlap < chunk_size`` always holds, which also guarantees that
    token windows advance.
    """

    chunk_size: int = 1000
    chunk_overlap: int = 200

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise ConfigValidationError(
                f"chunk_size must be an integer, got {self.chunk_size!r}", {"chunk_size": self.chunk_size}
            )
        if isinstance(self.chunk_overlap, bool) or not isinstance(self.chunk_overlap, int):
            raise ConfigValidationError(
                f"chunk_overlap must be an integer, got {self.chunk_overlap!r}", {"chunk_overlap": self.chunk_overlap}
            )
        if self.chunk_size <= 0:
            raise ConfigValidationError(
                f"chunk_size must be positive, got {self.chunk_size}", {"chunk_size": self.chunk_size}
            )
        if self.chunk_overlap < 0:
            raise ConfigValidationError(
                f"chunk_overlap must be non-negative, got {self.chunk_overlap}", {"chunk_overlap": self.chunk_overlap}
            )
        if self.chunk_overlap >= self.chunk_size:
            raise OverlapConfigurationError(self.chunk_overlap, self.chunk_size)


class BaseTextSplitter(ABC):
    """Base class for all splitting strategies."""

    # Label used in logs and metrics
    strategy_name: str = "base"

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        on_oversized_chunk: OversizedChunkCallback | None = None,
    ) -> None:
        """Initialize splitter with the shared size configuration.

        Args:
            chunk_size: Maximum chunk length
            chunk_overlap: Maximum overlap carried between consecutive chunks
            on_oversized_chunk: Optional callback receiving (chunk_length, chunk_size)
                whenever a chunk longer than chunk_size is emitted
        """
        self.config = SplitterConfig(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
        self.on_oversized_chunk = on_oversized_chunk
        logger.info(
            f"Initializing {self.strategy_name} splitter with chunk_size={chunk_size}, chunk_overlap={chunk_overlap}"
        )

    @property
    def chunk_size(self) -> int:
        return self.config.chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self.config.chunk_overlap

    @abstractmethod
    def _split_text(self, text: str) -> list[str]:
        """Split text into chunks.

        Args:
            text: The text to split

        Returns:
            Chunks in source order
        """

    def split_text(self, text: str) -> list[str]:
        """Split text into chunks, recording performance metrics."""
        with performance_monitor.measure_splitting(self.strategy_name, len(text)) as metrics:
            chunks = self._split_text(text)
            metrics.output_chunks = len(chunks)
        return chunks

    async def split_text_async(self, text: str) -> list[str]:
        """Asynchronous splitting; runs the CPU-bound work in the default executor."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.split_text, text)

    def merge_splits(self, splits: Iterable[str], separator: str) -> list[str]:
        """Merge units with this splitter's size configuration."""
        return merge_splits(
            splits,
            separator,
            self.config.chunk_size,
            self.config.chunk_overlap,
            on_oversized=self._report_oversized_chunk,
        )

    def _report_oversized_chunk(self, total: int, chunk_size: int) -> None:
        logger.warning(
            f"Created a chunk of size {total}, which is longer than the specified {chunk_size} "
            f"({self.strategy_name} splitter)"
        )
        if settings.ENABLE_METRICS:
            record_oversized_chunk(self.strategy_name)
        if self.on_oversized_chunk is not None:
            self.on_oversized_chunk(total, chunk_size)

    def create_documents(
        self,
        texts: Sequence[str],
        metadatas: Sequence[dict[str, Any]] | None = None,
        chunk_header_options: ChunkHeaderOptions | None = None,
    ) -> list[Document]:
        """Split texts and wrap every chunk in a Document with line metadata.

        Args:
            texts: Source texts
            metadatas: One metadata dict per text; empty dicts when omitted
            chunk_header_options: Headers to prepend to each chunk

        Returns:
            Documents for all texts, in order
        """
        options = chunk_header_options or ChunkHeaderOptions()
        documents: list[Document] = []
        for text, metadata in zip(texts, resolve_metadatas(texts, metadatas), strict=True):
            documents.extend(build_documents(text, self.split_text(text), metadata, options))
        return documents

    async def create_documents_async(
        self,
        texts: Sequence[str],
        metadatas: Sequence[dict[str, Any]] | None = None,
        chunk_header_options: ChunkHeaderOptions | None = None,
    ) -> list[Document]:
        """Asynchronous variant of create_documents."""
        options = chunk_header_options or ChunkHeaderOptions()
        documents: list[Document] = []
        for text, metadata in zip(texts, resolve_metadatas(texts, metadatas), strict=True):
            chunks = await self.split_text_async(text)
            documents.extend(build_documents(text, chunks, metadata, options))
        return documents

    def split_documents(
        self,
        documents: Iterable[Document],
        chunk_header_options: ChunkHeaderOptions | None = None,
    ) -> list[Document]:
        """Split existing documents, keeping their metadata."""
        selected = [doc for doc in documents if doc.page_content is not None]
        return self.create_documents(
            [doc.page_content for doc in selected],
            [doc.metadata for doc in selected],
            chunk_header_options,
        )

    async def split_documents_async(
        self,
        documents: Iterable[Document],
        chunk_header_options: ChunkHeaderOptions | None = None,
    ) -> list[Document]:
        """Asynchronous variant of split_documents."""
        selected = [doc for doc in documents if doc.page_content is not None]
        return await self.create_documents_async(
            [doc.page_content for doc in selected],
            [doc.metadata for doc in selected],
            chunk_header_options,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(chunk_size={self.config.chunk_size}, "
            f"chunk_overlap={self.config.chunk_overlap})"
        )
