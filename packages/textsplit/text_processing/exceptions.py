"""
Exception hierarchy for text splitting operations.

Configuration problems are raised when a splitter is constructed, tokenizer
problems on the first split that needs the tokenizer. Oversized chunks are
never raised; they are reported through logging and metrics.
"""

from typing import Any


class TextProcessingError(Exception):
    """Base exception for all text processing errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ChunkingError(TextProcessingError):
    """Base exception for chunking-related errors."""


class ValidationError(TextProcessingError):
    """Base exception for validation errors."""


class TokenizerError(TextProcessingError):
    """Base exception for tokenizer-related errors."""


# Specific chunking errors
class ChunkSizeError(ChunkingError):
    """Raised when chunk size constraints are violated."""


# Specific validation errors
class ConfigValidationError(ValidationError, ValueError):
    """Raised when splitter configuration validation fails."""


class OverlapConfigurationError(ConfigValidationError):
    """Raised when the overlap is not smaller than the chunk size."""

    def __init__(self, chunk_overlap: int, chunk_size: int) -> None:
        super().__init__(
            f"Cannot have chunk_overlap >= chunk_size (got {chunk_overlap} >= {chunk_size})",
            {"chunk_overlap": chunk_overlap, "chunk_size": chunk_size},
        )
        self.chunk_overlap = chunk_overlap
        self.chunk_size = chunk_size


# Specific tokenizer errors
class TokenizerLoadError(TokenizerError):
    """Raised when a tokenizer encoding cannot be loaded."""

    def __init__(self, encoding_name: str, reason: str) -> None:
        super().__init__(
            f"Failed to load tokenizer encoding '{encoding_name}': {reason}",
            {"encoding_name": encoding_name},
        )
        self.encoding_name = encoding_name


# Factory errors
class ChunkerCreationError(ChunkingError, ValueError):
    """Raised when splitter creation fails in the factory."""


class UnknownStrategyError(ChunkerCreationError):
    """Raised when an unknown splitting strategy is requested."""
