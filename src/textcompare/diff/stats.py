#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/stats.py
"""Aggregate statistics over a diff item sequence."""

from __future__ import annotations

from typing import Iterable

from textcompare.diff.preprocess import split_whitespace
from textcompare.models import DiffItem, DiffKind, DiffStats


def count_words(text: str) -> int:
    """Count whitespace-delimited words."""
    return len(split_whitespace(text))


def calculate_similarity(items: Iterable[DiffItem], left_text: str, right_text: str) -> float:
    """Estimate how much of the longer input is unchanged, in percent.

    The changed amount is the UTF-8 byte length of the content of every
    non-equal item; for modifications that is the new-side text. This is
    an approximation, not an edit distance, and it is not symmetric.
    Two empty inputs are 100% similar.
    """
    total = max(len(left_text.encode("utf-8")), len(right_text.encode("utf-8")))
    if total == 0:
        return 100.0

    changed = sum(len(item.content.encode("utf-8")) for item in items if item.kind is not DiffKind.EQUAL)
    return min(100.0, max(0.0, (total - changed) / total * 100.0))


def calculate_stats(items: list[DiffItem], left_text: str, right_text: str) -> DiffStats:
    """Compute counts, word totals and similarity for a diff.

    Parameters
    ----------
    items : list of DiffItem
        Diff items of one comparison
    left_text : str
        Original (not normalized) left text
    right_text : str
        Original (not normalized) right text

    Returns
    -------
    DiffStats
        Aggregated statistics

    """
    additions = deletions = modifications = 0
    added_words = deleted_words = 0

    for item in items:
        if item.kind is DiffKind.ADD:
            additions += 1
            added_words += count_words(item.content)
        elif item.kind is DiffKind.REMOVE:
            deletions += 1
            deleted_words += count_words(item.content)
        elif item.kind is DiffKind.MODIFY:
            modifications += 1
            added_words += count_words(item.content)
            if item.original_content is not None:
                deleted_words += count_words(item.original_content)

    return DiffStats(
        total_changes=additions + deletions + modifications,
        additions=additions,
        deletions=deletions,
        modifications=modifications,
        added_words=added_words,
        deleted_words=deleted_words,
        similarity=calculate_similarity(items, left_text, right_text),
    )
