"""Hierarchical text splitting into size-bounded, overlapping chunks.

The package is organised as:

- text_processing: splitters, the shared merge routine and document assembly
- config: settings loaded from the environment
- metrics: Prometheus metrics for splitting
"""

from textsplit.text_processing import (
    BaseTextSplitter,
    CharacterTextSplitter,
    ChunkHeaderOptions,
    Document,
    MarkdownTextSplitter,
    RecursiveCharacterTextSplitter,
    SplitterConfig,
    SplitterFactory,
    TokenTextSplitter,
)

__version__ = "0.1.0"

__all__ = [
    "BaseTextSplitter",
    "CharacterTextSplitter",
    "ChunkHeaderOptions",
    "Document",
    "MarkdownTextSplitter",
    "RecursiveCharacterTextSplitter",
    "SplitterConfig",
    "SplitterFactory",
    "TokenTextSplitter",
]
