# textsplit/text_processing/__init__.py
"""
Text processing module for splitting text into bounded chunks.
"""

from .base_splitter import BaseTextSplitter, SplitterConfig
from .documents import ChunkHeaderOptions, Document
from .merge import merge_splits
from .splitter_factory import SplitterFactory
from .strategies import (
    CharacterTextSplitter,
    MarkdownTextSplitter,
    RecursiveCharacterTextSplitter,
    TokenTextSplitter,
)

__all__ = [
    "BaseTextSplitter",
    "SplitterConfig",
    "ChunkHeaderOptions",
    "Document",
    "merge_splits",
    "SplitterFactory",
    "CharacterTextSplitter",
    "RecursiveCharacterTextSplitter",
    "MarkdownTextSplitter",
    "TokenTextSplitter",
]
