#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/script.py
"""Detection of CJK ideographs, which select the CJK segmentation rules."""

from __future__ import annotations

from textcompare.constants import CJK_RANGES


def is_cjk_char(char: str) -> bool:
    """Return True if ``char`` is a CJK unified ideograph (incl. Ext. A and B)."""
    code_point = ord(char)
    return any(low <= code_point <= high for low, high in CJK_RANGES)


def contains_cjk(text: str) -> bool:
    """Return True if any character of ``text`` is a CJK ideograph."""
    return any(is_cjk_char(char) for char in text)
