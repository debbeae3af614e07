#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/markdown.py
"""Markdown diff report renderer."""

from __future__ import annotations

from io import StringIO

from textcompare.diff.renderers.common import KIND_LABELS, format_timestamp, select_items, stats_rows
from textcompare.models import DiffItem, DiffKind, DiffResult
from textcompare.options import ExportOptions


def _fence_for(text: str) -> str:
    """Pick a backtick fence longer than any backtick run inside ``text``."""
    longest = run = 0
    for char in text:
        run = run + 1 if char == "`" else 0
        longest = max(longest, run)
    return "`" * max(3, longest + 1)


class MarkdownDiffRenderer:
    """Render a diff result as a Markdown report.

    The report has a title, an optional timestamp line, an optional
    statistics table, and one section per item with its content in a
    fenced block. Modified items show the original and the new text.
    """

    def __init__(self, options: ExportOptions | None = None):
        """Initialize the Markdown renderer."""
        self.options = options or ExportOptions(format="markdown")

    def render(self, result: DiffResult) -> str:
        output = StringIO()
        output.write(f"# {self.options.title}\n\n")

        if self.options.include_timestamp:
            output.write(f"*Generated: {format_timestamp()}*\n\n")

        if self.options.include_stats:
            output.write("## Statistics\n\n")
            output.write("| Metric | Value |\n")
            output.write("|--------|-------|\n")
            for label, value in stats_rows(result):
                output.write(f"| {label} | {value} |\n")
            output.write("\n")

        output.write("## Differences\n\n")
        items = select_items(result, self.options)
        if not items:
            output.write("No differences found.\n")
        for item in items:
            self._write_item(item, output)

        return output.getvalue()

    def _write_item(self, item: DiffItem, output: StringIO) -> None:
        line_info = f" (line {item.line_number})" if item.line_number is not None else ""
        output.write(f"### {KIND_LABELS[item.kind]}{line_info}\n\n")

        if item.kind is DiffKind.MODIFY:
            original = item.original_content or ""
            output.write("**Original:**\n\n")
            self._write_block(original, output)
            output.write("**Changed:**\n\n")
        self._write_block(item.content, output)

    def _write_block(self, text: str, output: StringIO) -> None:
        fence = _fence_for(text)
        output.write(f"{fence}\n{text}\n{fence}\n\n")
