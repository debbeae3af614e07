#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/preprocess.py
"""Normalization applied to both inputs before they are compared.

Whitespace means the Unicode White_Space property. That is
``str.isspace`` without the four information separators U+001C to U+001F,
which Python also treats as whitespace.
"""

from __future__ import annotations

import re
import unicodedata

from textcompare.diff.script import is_cjk_char
from textcompare.options import DiffOptions

_WHITESPACE_RE = re.compile(r"[^\S\x1c-\x1f]+")

# Combining vowel signs and viramas of Indic, Thai and similar scripts
_LETTER_MARK_CATEGORIES = frozenset({"Mn", "Mc"})


def is_whitespace(char: str) -> bool:
    return char.isspace() and not "\x1c" <= char <= "\x1f"


def split_whitespace(text: str) -> list[str]:
    """Split ``text`` on whitespace runs, dropping empty pieces."""
    return [piece for piece in _WHITESPACE_RE.split(text) if piece]


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace in text.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Text with every whitespace run replaced by a single space and
        leading/trailing whitespace removed

    """
    return " ".join(split_whitespace(text))


def is_word_char(char: str) -> bool:
    """Whether ``char`` survives punctuation stripping.

    Letters, digits and CJK ideographs count, and so do nonspacing and
    spacing combining marks, so ``"का"`` keeps its vowel sign. Marks are
    kept as a whole category, which also keeps accents written as a
    separate combining character.
    """
    return char.isalnum() or is_cjk_char(char) or unicodedata.category(char) in _LETTER_MARK_CATEGORIES


def strip_punctuation(text: str) -> str:
    """Remove every character that is not a word character or whitespace."""
    return "".join(char for char in text if is_word_char(char) or is_whitespace(char))


def preprocess_text(text: str, options: DiffOptions) -> str:
    """Apply the normalization options to ``text``.

    The steps always run in the same order (case folding, whitespace
    collapsing, punctuation stripping) since each one sees the output of
    the previous one.

    Parameters
    ----------
    text : str
        Raw input text
    options : DiffOptions
        Comparison options

    Returns
    -------
    str
        Normalized text

    """
    processed = text
    if options.ignore_case:
        processed = processed.lower()
    if options.ignore_whitespace:
        processed = normalize_whitespace(processed)
    if options.ignore_punctuation:
        processed = strip_punctuation(processed)
    return processed
