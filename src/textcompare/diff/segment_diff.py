#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/segment_diff.py
"""Segment-level diff by synchronized walk.

The walk advances one cursor per side and compares segments pairwise. It
does not search for a common subsequence, so an inserted or reordered
segment shifts the pairing and every following pair that differs is
reported as a modification.
"""

from __future__ import annotations

from typing import Sequence

from textcompare.diff.items import EditOp, add_op, build_items, equal_op, remove_op
from textcompare.models import DiffItem, DiffKind


def synchronized_segment_diff(left: Sequence[str], right: Sequence[str]) -> list[DiffItem]:
    """Pair up two segment sequences position by position.

    Parameters
    ----------
    left : sequence of str
        Segments of the left text
    right : sequence of str
        Segments of the right text

    Returns
    -------
    list of DiffItem
        One item per step of the walk. Add items index into ``right``;
        remove, equal and modify items index into ``left``. Modify items
        carry the left segment as ``original_content`` and the right one
        as ``content``.

    """
    ops: list[EditOp] = []
    li = ri = 0

    while li < len(left) or ri < len(right):
        if li >= len(left):
            ops.append(add_op(right, ri))
            ri += 1
        elif ri >= len(right):
            ops.append(remove_op(left, li))
            li += 1
        elif left[li] == right[ri]:
            ops.append(equal_op(left, li))
            li += 1
            ri += 1
        else:
            ops.append((DiffKind.MODIFY, li, right[ri], left[li]))
            li += 1
            ri += 1

    return build_items(ops)
