#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/common.py
"""Helpers shared by the report renderers."""

from __future__ import annotations

from datetime import datetime

from textcompare.models import DiffItem, DiffKind, DiffResult
from textcompare.options import ExportOptions

KIND_LABELS = {
    DiffKind.ADD: "Added",
    DiffKind.REMOVE: "Removed",
    DiffKind.MODIFY: "Modified",
    DiffKind.EQUAL: "Unchanged",
}


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a local timestamp as ``YYYY-MM-DD HH:MM:SS``."""
    return (moment or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


def select_items(result: DiffResult, options: ExportOptions) -> list[DiffItem]:
    """Items a report shows: all of them, or only the changes."""
    if options.include_equal:
        return list(result.items)
    return result.changes


def stats_rows(result: DiffResult) -> list[tuple[str, str]]:
    """Statistics as (label, value) pairs, in report order."""
    stats = result.stats
    return [
        ("Total changes", str(stats.total_changes)),
        ("Additions", f"{stats.additions} ({stats.added_words} words)"),
        ("Deletions", f"{stats.deletions} ({stats.deleted_words} words)"),
        ("Modifications", str(stats.modifications)),
        ("Similarity", f"{stats.similarity:.2f}%"),
    ]
