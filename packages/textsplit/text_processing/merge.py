#!/usr/bin/env python3
"""
Size-bounded merging of split units into chunks.

All separator-based splitters share this routine: it greedily packs small
units into chunks no longer than ``chunk_size`` and seeds each new chunk with
up to ``chunk_overlap`` characters of trailing context from the previous one.
"""

import logging
from collections import deque
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

OversizedChunkCallback = Callable[[int, int], None]


def _join_docs(docs: Iterable[str], separator: str) -> str | None:
    text = separator.join(docs).strip()
    return text or None


def _warn_oversized(total: int, chunk_size: int) -> None:
    logger.warning(f"Created a chunk of size {total}, which is longer than the specified {chunk_size}")


def merge_splits(
    splits: Iterable[str],
    separator: str,
    chunk_size: int,
    chunk_overlap: int,
    on_oversized: OversizedChunkCallback | None = None,
) -> list[str]:
    """Merge split units into chunks of at most ``chunk_size`` characters.

    Units are never cut here: a unit longer than ``chunk_size`` becomes a chunk
    of its own and is reported through ``on_oversized(total, chunk_size)``
    (a WARNING log when no callback is given). Chunks that are empty after
    stripping are dropped.

    Args:
        splits: Units in source order
        separator: String placed between units when joining
        chunk_size: Maximum chunk length in characters
        chunk_overlap: Maximum characters carried over into the next chunk
        on_oversized: Optional diagnostic sink for oversized chunks

    Returns:
        Chunks in source order
    """
    report = on_oversized or _warn_oversized
    separator_len = len(separator)

    docs: list[str] = []
    current_doc: deque[str] = deque()
    # Exact length of separator.join(current_doc)
    total = 0

    for d in splits:
        _len = len(d)
        if current_doc and total + _len + separator_len > chunk_size:
            if total > chunk_size:
                report(total, chunk_size)

            doc = _join_docs(current_doc, separator)
            if doc is not None:
                docs.append(doc)

            # Keep on popping while we still have units and either:
            # - we hold more than the chunk overlap
            # - or the incoming unit would still not fit
            while current_doc and (total > chunk_overlap or total + _len + separator_len > chunk_size):
                total -= len(current_doc[0]) + (separator_len if len(current_doc) > 1 else 0)
                current_doc.popleft()

        total += _len + (separator_len if current_doc else 0)
        current_doc.append(d)

    if total > chunk_size:
        report(total, chunk_size)

    doc = _join_docs(current_doc, separator)
    if doc is not None:
        docs.append(doc)

    return docs
