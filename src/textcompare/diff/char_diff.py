#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/char_diff.py
"""Character-level diff based on the longest common subsequence.

Two strategies produce the same item shape, one item per character:

- The table strategy fills the full ``(m+1) x (n+1)`` LCS table in one
  contiguous array and backtraces from ``(m, n)``. Its output is fully
  determined: when both neighbours of a cell tie, the backtrace takes the
  insertion branch.
- The linear-space strategy (Hirschberg's divide and conquer) is used when
  the table would exceed ``max_cells`` cells. It finds an LCS of the same
  length in O(m + n) memory; among equally long alignments it may pick a
  different one than the table strategy.

Both are O(m * n) in time.
"""

from __future__ import annotations

import logging
from array import array

from textcompare.constants import DEFAULT_MAX_CHAR_DIFF_CELLS
from textcompare.diff.items import EditOp, add_op, build_items, equal_op, remove_op
from textcompare.models import DiffItem

logger = logging.getLogger(__name__)


def lcs_table(left: str, right: str) -> array:
    """Build the LCS length table of ``left`` and ``right``.

    Parameters
    ----------
    left : str
        Left character sequence (length m)
    right : str
        Right character sequence (length n)

    Returns
    -------
    array
        Flat unsigned array of ``(m+1) * (n+1)`` cells; the LCS length of
        ``left[:i]`` and ``right[:j]`` is at index ``i * (n+1) + j``

    """
    m, n = len(left), len(right)
    width = n + 1
    table = array("I", [0]) * ((m + 1) * width)

    for i in range(1, m + 1):
        row = i * width
        above = row - width
        left_char = left[i - 1]
        for j in range(1, n + 1):
            if left_char == right[j - 1]:
                table[row + j] = table[above + j - 1] + 1
            else:
                up = table[above + j]
                back = table[row + j - 1]
                table[row + j] = up if up >= back else back

    return table


def _table_ops(left: str, right: str) -> list[EditOp]:
    table = lcs_table(left, right)
    width = len(right) + 1
    ops: list[EditOp] = []
    i, j = len(left), len(right)

    while i > 0 or j > 0:
        if i == 0:
            ops.append(add_op(right, j - 1))
            j -= 1
        elif j == 0:
            ops.append(remove_op(left, i - 1))
            i -= 1
        elif left[i - 1] == right[j - 1]:
            ops.append(equal_op(left, i - 1))
            i -= 1
            j -= 1
        elif table[(i - 1) * width + j] > table[i * width + j - 1]:
            ops.append(remove_op(left, i - 1))
            i -= 1
        else:
            ops.append(add_op(right, j - 1))
            j -= 1

    ops.reverse()
    return ops


def _lcs_last_row(left: str, right: str) -> list[int]:
    """LCS lengths of all of ``left`` against every prefix of ``right``."""
    previous = [0] * (len(right) + 1)
    for left_char in left:
        current = [0]
        for j, right_char in enumerate(right, 1):
            if left_char == right_char:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous


def _linear_space_ops(
    left: str,
    right: str,
    left_start: int,
    left_end: int,
    right_start: int,
    right_end: int,
    ops: list[EditOp],
) -> None:
    if left_start == left_end:
        ops.extend(add_op(right, j) for j in range(right_start, right_end))
        return
    if right_start == right_end:
        ops.extend(remove_op(left, i) for i in range(left_start, left_end))
        return

    if left_end - left_start == 1:
        match = right.find(left[left_start], right_start, right_end)
        if match < 0:
            ops.append(remove_op(left, left_start))
            ops.extend(add_op(right, j) for j in range(right_start, right_end))
        else:
            ops.extend(add_op(right, j) for j in range(right_start, match))
            ops.append(equal_op(left, left_start))
            ops.extend(add_op(right, j) for j in range(match + 1, right_end))
        return

    left_mid = (left_start + left_end) // 2
    right_part = right[right_start:right_end]
    upper = _lcs_last_row(left[left_start:left_mid], right_part)
    lower = _lcs_last_row(left[left_mid:left_end][::-1], right_part[::-1])

    span = right_end - right_start
    split = max(range(span + 1), key=lambda k: upper[k] + lower[span - k])

    _linear_space_ops(left, right, left_start, left_mid, right_start, right_start + split, ops)
    _linear_space_ops(left, right, left_mid, left_end, right_start + split, right_end, ops)


def char_diff(left: str, right: str, max_cells: int = DEFAULT_MAX_CHAR_DIFF_CELLS) -> list[DiffItem]:
    """Compute the character-level diff of two normalized strings.

    Parameters
    ----------
    left : str
        Normalized left text
    right : str
        Normalized right text
    max_cells : int
        Largest LCS table built in memory; above it the linear-space
        strategy is used

    Returns
    -------
    list of DiffItem
        One add/remove/equal item per character, ordered left to right.
        Add items index into ``right``; remove and equal items index into
        ``left``. ``line_number`` is the 1-based character index.

    """
    cells = (len(left) + 1) * (len(right) + 1)
    if cells <= max_cells:
        ops = _table_ops(left, right)
    else:
        logger.debug(
            "LCS table of %d cells exceeds limit of %d; using linear-space alignment", cells, max_cells
        )
        ops = []
        _linear_space_ops(left, right, 0, len(left), 0, len(right), ops)

    return build_items(ops)
