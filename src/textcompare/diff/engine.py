#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/engine.py
"""Comparison pipeline: normalize, pick a strategy, diff, and summarize.

The engine holds nothing but its frozen options, so one instance may serve
concurrent comparisons from several threads.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Union

from textcompare.constants import DEFAULT_CHUNK_SIZE, NAVIGATION_PREVIEW_LENGTH
from textcompare.diff.char_diff import char_diff
from textcompare.diff.preprocess import preprocess_text
from textcompare.diff.script import contains_cjk
from textcompare.diff.segment_diff import synchronized_segment_diff
from textcompare.diff.segmenter import segment_text
from textcompare.diff.stats import calculate_stats
from textcompare.diff.streaming import split_into_chunks
from textcompare.models import DiffChunk, DiffItem, DiffResult, NavigationItem, TextChunk
from textcompare.options import DiffOptions

logger = logging.getLogger(__name__)

OptionsInput = Union[DiffOptions, Mapping[str, Any], None]


class DiffEngine:
    """Compare two texts under a fixed set of options.

    Parameters
    ----------
    options : DiffOptions, mapping, or None
        Comparison options. A mapping is decoded with
        :meth:`DiffOptions.from_dict`; ``None`` selects the defaults.

    Raises
    ------
    ConfigurationError
        If ``options`` is a mapping that does not decode to valid options

    Examples
    --------
    >>> engine = DiffEngine(DiffOptions(ignore_case=True))
    >>> engine.compute_diff("Hello", "hello").stats.similarity
    100.0

    """

    def __init__(self, options: OptionsInput = None) -> None:
        """Initialize the engine with decoded options."""
        if options is None:
            options = DiffOptions()
        elif not isinstance(options, DiffOptions):
            options = DiffOptions.from_dict(options)
        self._options = options

    @property
    def options(self) -> DiffOptions:
        return self._options

    def compute_diff(self, left: str, right: str) -> DiffResult:
        """Compare two texts.

        Both inputs are normalized first. Segment-level comparison is used
        when paragraph or sentence splitting is enabled, character-level
        otherwise. Script detection and similarity look at the raw inputs.

        Parameters
        ----------
        left : str
            Original text
        right : str
            Changed text

        Returns
        -------
        DiffResult
            Ordered items and their statistics

        """
        processed_left = preprocess_text(left, self._options)
        processed_right = preprocess_text(right, self._options)
        cjk = contains_cjk(left) or contains_cjk(right)

        if self._options.segmented:
            items = self._segment_diff(processed_left, processed_right, cjk)
        else:
            logger.debug("Character diff of %d x %d characters", len(processed_left), len(processed_right))
            items = char_diff(processed_left, processed_right, max_cells=self._options.max_char_diff_cells)

        return DiffResult(items=items, stats=calculate_stats(items, left, right))

    def _segment_diff(self, left: str, right: str, cjk: bool) -> list[DiffItem]:
        left_segments = segment_text(left, cjk)
        right_segments = segment_text(right, cjk)
        logger.debug(
            "Segment diff (%s rules) of %d x %d segments",
            "CJK" if cjk else "Latin",
            len(left_segments),
            len(right_segments),
        )
        return synchronized_segment_diff(left_segments, right_segments)

    def compute_diff_stream(self, left: str, right: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[DiffChunk]:
        """Compare two texts window by window.

        Each window of ``chunk_size`` lines is compared with
        :meth:`compute_diff` when the consumer asks for it; nothing is
        computed ahead. Item ids and statistics are scoped to the window.
        Stop iterating to cancel.

        Parameters
        ----------
        left : str
            Original text
        right : str
            Changed text
        chunk_size : int
            Lines per window

        Returns
        -------
        Iterator[DiffChunk]
            Finite sequence of chunks ordered by index

        Raises
        ------
        ValidationError
            If ``chunk_size`` is not a positive integer

        """
        return self._iter_chunks(split_into_chunks(left, right, chunk_size))

    def _iter_chunks(self, chunks: Iterator[TextChunk]) -> Iterator[DiffChunk]:
        for chunk in chunks:
            logger.debug(
                "Comparing chunk %d/%d (lines %d-%d)", chunk.index + 1, chunk.total, chunk.start_line, chunk.end_line
            )
            result = self.compute_diff(chunk.left, chunk.right)
            yield DiffChunk(index=chunk.index, total=chunk.total, items=result.items, stats=result.stats)


def build_navigation(items: list[DiffItem], preview_length: int = NAVIGATION_PREVIEW_LENGTH) -> list[NavigationItem]:
    """List the changes of a diff as jump targets.

    Parameters
    ----------
    items : list of DiffItem
        Diff items
    preview_length : int
        Characters of content shown in the preview; longer content is cut
        and suffixed with ``"..."``

    Returns
    -------
    list of NavigationItem
        One entry per non-equal item, in order

    """
    navigation = []
    for item in items:
        if not item.is_change:
            continue
        preview = item.content[:preview_length]
        if len(item.content) > preview_length:
            preview += "..."
        navigation.append(
            NavigationItem(id=item.id, kind=item.kind, line_number=item.line_number or 0, preview=preview)
        )
    return navigation


def compute_diff(left: str, right: str, options: OptionsInput = None) -> DiffResult:
    """Compare two texts with a one-off engine."""
    return DiffEngine(options).compute_diff(left, right)


def compute_diff_stream(
    left: str, right: str, chunk_size: int = DEFAULT_CHUNK_SIZE, options: OptionsInput = None
) -> Iterator[DiffChunk]:
    """Compare two texts window by window with a one-off engine."""
    return DiffEngine(options).compute_diff_stream(left, right, chunk_size)
