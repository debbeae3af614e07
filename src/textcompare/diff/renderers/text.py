#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/text.py
"""Plain-text diff report renderer with optional ANSI colors.

Each change is listed with a running number, its line number and a kind
marker: ``[+]`` for additions, ``[-]`` for deletions, ``[~]`` for
modifications and ``[=]`` for unchanged content. With colors enabled:
- Green for additions
- Red for deletions
- Cyan for modifications
- Bold for section headers
"""

from __future__ import annotations

from typing import Iterator

from textcompare.diff.renderers.common import format_timestamp, select_items, stats_rows
from textcompare.models import DiffItem, DiffKind, DiffResult
from textcompare.options import ExportOptions

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

_MARKERS = {
    DiffKind.ADD: ("[+]", GREEN),
    DiffKind.REMOVE: ("[-]", RED),
    DiffKind.MODIFY: ("[~]", CYAN),
    DiffKind.EQUAL: ("[=]", DIM),
}


class TextDiffRenderer:
    """Render a diff result as a plain-text report.

    Parameters
    ----------
    options : ExportOptions, optional
        Report options
    use_color : bool, default = False
        If True, add ANSI color codes to the output

    Examples
    --------
    >>> from textcompare import compute_diff
    >>> renderer = TextDiffRenderer(use_color=True)
    >>> for line in renderer.render_lines(compute_diff("old", "new")):
    ...     print(line)

    """

    def __init__(self, options: ExportOptions | None = None, use_color: bool = False):
        """Initialize the text renderer."""
        self.options = options or ExportOptions(format="text")
        self.use_color = use_color

    def render(self, result: DiffResult) -> str:
        return "\n".join(self.render_lines(result)) + "\n"

    def render_lines(self, result: DiffResult) -> Iterator[str]:
        """Yield the report line by line."""
        yield self._paint(self.options.title, BOLD)
        yield "=" * 50
        if self.options.include_timestamp:
            yield f"Generated: {format_timestamp()}"
        yield ""

        if self.options.include_stats:
            yield self._paint("Statistics", BOLD)
            yield "-" * 30
            for label, value in stats_rows(result):
                yield f"{label + ':':<16}{value}"
            yield ""

        yield self._paint("Differences", BOLD)
        yield "-" * 30
        items = select_items(result, self.options)
        if not items:
            yield "No differences found."
        for number, item in enumerate(items, 1):
            yield from self._item_lines(number, item)

    def _item_lines(self, number: int, item: DiffItem) -> Iterator[str]:
        marker, color = _MARKERS[item.kind]
        line_info = f"[line {item.line_number}] " if item.line_number is not None else ""
        yield f"{number}. {line_info}{self._paint(marker, color)}"
        if item.kind is DiffKind.MODIFY:
            yield f"   original: {self._paint(item.original_content or '', RED)}"
            yield f"   changed:  {self._paint(item.content, GREEN)}"
        else:
            yield f"   content:  {self._paint(item.content, color)}"
        yield ""

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{RESET}"
