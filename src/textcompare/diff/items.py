#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/items.py
"""Construction of diff items from edit operations."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from textcompare.constants import DIFF_ID_PREFIX
from textcompare.models import DiffItem, DiffKind, Position

# (kind, index, content, original_content); ``index`` is 0-based on the side
# the operation originates from
EditOp = tuple[DiffKind, int, str, Optional[str]]


def make_item(sequence_number: int, kind: DiffKind, index: int, content: str, original: str | None) -> DiffItem:
    """Build one item covering the single unit at ``index``."""
    return DiffItem(
        id=f"{DIFF_ID_PREFIX}{sequence_number}",
        kind=kind,
        content=content,
        original_content=original,
        line_number=index + 1,
        position=Position(index, index + 1),
    )


def build_items(ops: Iterable[EditOp]) -> list[DiffItem]:
    """Turn edit operations into items, numbering ids in sequence order."""
    return [
        make_item(number, kind, index, content, original) for number, (kind, index, content, original) in enumerate(ops)
    ]


def add_op(right: Sequence[str], j: int) -> EditOp:
    return (DiffKind.ADD, j, right[j], None)


def remove_op(left: Sequence[str], i: int) -> EditOp:
    return (DiffKind.REMOVE, i, left[i], left[i])


def equal_op(left: Sequence[str], i: int) -> EditOp:
    return (DiffKind.EQUAL, i, left[i], None)
