"""Splitting strategies package."""

from textsplit.text_processing.strategies.character_splitter import CharacterTextSplitter
from textsplit.text_processing.strategies.markdown_splitter import MarkdownTextSplitter
from textsplit.text_processing.strategies.recursive_splitter import RecursiveCharacterTextSplitter
from textsplit.text_processing.strategies.token_splitter import TokenTextSplitter

__all__ = [
    "CharacterTextSplitter",
    "RecursiveCharacterTextSplitter",
    "MarkdownTextSplitter",
    "TokenTextSplitter",
]
