#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/segmenter.py
"""Split text into sentence-like segments for segment-level comparison.

CJK text keeps the terminal punctuation on the segment it closes, while
Latin text drops its delimiters. Callers rely on that difference, so the
two rules are kept apart.
"""

from __future__ import annotations

import re

from textcompare.constants import CJK_SENTENCE_TERMINATORS, LATIN_SENTENCE_DELIMITERS

_LATIN_SPLIT_RE = re.compile("[" + re.escape(LATIN_SENTENCE_DELIMITERS) + "]")


def segment_cjk_text(text: str) -> list[str]:
    """Split CJK text after each of ``。！？；``, keeping the terminator.

    A trailing run without a terminator becomes the final segment.
    """
    segments: list[str] = []
    current: list[str] = []

    for char in text:
        current.append(char)
        if char in CJK_SENTENCE_TERMINATORS:
            segments.append("".join(current))
            current = []

    if current:
        segments.append("".join(current))

    return segments


def segment_latin_text(text: str) -> list[str]:
    """Split text on ``.``, ``!``, ``?`` and ``;``, discarding the delimiters.

    Empty pieces between consecutive delimiters are kept; the empty piece
    after a final delimiter is not.

    Examples
    --------
    >>> segment_latin_text("One. Two!")
    ['One', ' Two']
    >>> segment_latin_text("a..b")
    ['a', '', 'b']

    """
    pieces = _LATIN_SPLIT_RE.split(text)
    if pieces and pieces[-1] == "":
        pieces.pop()
    return pieces


def segment_text(text: str, cjk: bool) -> list[str]:
    """Segment ``text`` with the CJK or the Latin rule."""
    if cjk:
        return segment_cjk_text(text)
    return segment_latin_text(text)
