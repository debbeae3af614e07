#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/__init__.py
"""Text comparison engine.

This package turns two texts into an ordered sequence of typed difference
records (add, remove, modify, equal) plus aggregate statistics.

Key Features
------------
- Character-level diff based on the longest common subsequence, with a
  linear-space fallback for large inputs
- Segment-level diff on sentences, with CJK-aware segmentation
- Case, whitespace and punctuation normalization
- Window-by-window streaming for large inputs

Examples
--------
Compare two strings:
    >>> from textcompare.diff import DiffEngine
    >>> result = DiffEngine().compute_diff("hello world", "hello rust")
    >>> result.stats.total_changes > 0
    True

Stream a large comparison:
    >>> for chunk in DiffEngine().compute_diff_stream(old_text, new_text, chunk_size=200):
    ...     print(chunk.index, chunk.stats.similarity)

"""

from textcompare.diff.engine import DiffEngine, build_navigation, compute_diff, compute_diff_stream

__all__ = [
    "DiffEngine",
    "build_navigation",
    "compute_diff",
    "compute_diff_stream",
]
