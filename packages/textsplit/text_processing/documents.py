#!/usr/bin/env python3
"""
Document assembly for split chunks.

Turns the chunks of each source text into Document objects carrying an
optional header and ``loc.lines`` metadata describing which lines of the
source text the chunk came from.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from textsplit.text_processing.exceptions import ValidationError


@dataclass
class Document:
    """A piece of text with its metadata."""

    page_content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ChunkHeaderOptions:
    """Headers prepended to every produced document."""

    chunk_header: str = ""
    chunk_overlap_header: str = "(cont'd) "
    append_chunk_overlap_header: bool = False


def resolve_metadatas(texts: Sequence[str], metadatas: Sequence[dict[str, Any]] | None) -> list[dict[str, Any]]:
    """Pair every text with a metadata dict, defaulting to empty ones."""
    if not metadatas:
        return [{} for _ in texts]
    if len(metadatas) != len(texts):
        raise ValidationError(
            f"Got {len(metadatas)} metadata entries for {len(texts)} texts",
            {"texts": len(texts), "metadatas": len(metadatas)},
        )
    return list(metadatas)


def build_documents(
    text: str,
    chunks: Iterable[str],
    metadata: dict[str, Any],
    options: ChunkHeaderOptions,
) -> list[Document]:
    """Build one Document per chunk of ``text``.

    Line numbers are 1-based. Newlines dropped between two chunks by the
    splitter are found by locating both chunks in the source text, so the
    numbering stays aligned with the source text even though separators are gone.
    """
    documents = []
    line_counter_index = 1
    prev_chunk: str | None = None

    for chunk in chunks:
        page_content = options.chunk_header

        number_of_intermediate_new_lines = 0
        if prev_chunk:
            index_chunk = text.find(chunk)
            index_end_prev_chunk = text.find(prev_chunk) + len(prev_chunk)
            removed_new_lines = text[index_end_prev_chunk:index_chunk]
            number_of_intermediate_new_lines = removed_new_lines.count("\n")
            if options.append_chunk_overlap_header:
                page_content += options.chunk_overlap_header

        line_counter_index += number_of_intermediate_new_lines
        new_lines_count = chunk.count("\n")

        loc = dict(metadata["loc"]) if isinstance(metadata.get("loc"), dict) else {}
        loc["lines"] = {
            "from": line_counter_index,
            "to": line_counter_index + new_lines_count,
        }

        documents.append(Document(page_content=page_content + chunk, metadata={**metadata, "loc": loc}))
        line_counter_index += new_lines_count
        prev_chunk = chunk

    return documents
