#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/html.py
"""HTML diff report renderer.

Produces a standalone page: a header with the title and timestamp, an
optional statistics grid, and one block per diff item colored by kind.
Modified items show the replaced text struck through next to the new text.
"""

from __future__ import annotations

from html import escape
from io import StringIO

from textcompare.diff.renderers.common import KIND_LABELS, format_timestamp, select_items, stats_rows
from textcompare.models import DiffItem, DiffKind, DiffResult
from textcompare.options import ExportOptions


class HtmlDiffRenderer:
    """Render a diff result as visual HTML.

    Parameters
    ----------
    options : ExportOptions, optional
        Report options, including the colors for each kind of change
    inline_styles : bool, default = True
        If True, include CSS styles in the output

    Examples
    --------
    >>> from textcompare import compute_diff
    >>> html = HtmlDiffRenderer().render(compute_diff("old text", "new text"))
    >>> with open("diff.html", "w", encoding="utf-8") as f:
    ...     f.write(html)

    """

    def __init__(
        self,
        options: ExportOptions | None = None,
        inline_styles: bool = True,
    ):
        """Initialize the HTML diff renderer."""
        self.options = options or ExportOptions(format="html")
        self.inline_styles = inline_styles

    def render(self, result: DiffResult) -> str:
        """Render the diff result to an HTML string."""
        output = StringIO()
        self._write_html_prefix(output)

        if self.options.include_stats:
            self._render_summary(result, output)

        output.write("    <div class='diff-content'>\n")
        items = select_items(result, self.options)
        if not items:
            output.write("      <p><em>No differences found.</em></p>\n")
        for item in items:
            self._render_item(item, output)
        output.write("    </div>\n")

        self._write_html_suffix(output)
        return output.getvalue()

    def _write_html_prefix(self, output: StringIO) -> None:
        """Write the document head and page header."""
        title = escape(self.options.title)
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write("  <meta name='viewport' content='width=device-width, initial-scale=1.0'>\n")
        output.write(f"  <title>{title}</title>\n")

        if self.inline_styles:
            output.write("  <style>\n")
            output.write(self._get_css())
            output.write("  </style>\n")

        output.write("</head>\n")
        output.write("<body>\n")
        output.write("  <div class='container'>\n")
        output.write("    <div class='header'>\n")
        output.write(f"      <h1>{title}</h1>\n")
        if self.options.include_timestamp:
            output.write(f"      <div class='timestamp'>Generated: {format_timestamp()}</div>\n")
        output.write("    </div>\n")

    def _write_html_suffix(self, output: StringIO) -> None:
        """Write the closing HTML tags."""
        output.write("  </div>\n")
        output.write("</body>\n")
        output.write("</html>\n")

    def _render_summary(self, result: DiffResult, output: StringIO) -> None:
        output.write("    <div class='stats'>\n")
        for label, value in stats_rows(result):
            output.write("      <div class='stat-item'>\n")
            output.write(f"        <div class='stat-value'>{escape(value)}</div>\n")
            output.write(f"        <div class='stat-label'>{escape(label)}</div>\n")
            output.write("      </div>\n")
        output.write("    </div>\n")

    def _render_item(self, item: DiffItem, output: StringIO) -> None:
        line_number = item.line_number if item.line_number is not None else "&nbsp;"
        output.write(f"      <div class='diff-item diff-{item.kind.value}' title='{KIND_LABELS[item.kind]}'>\n")
        output.write(f"        <span class='line-number'>{line_number}</span>\n")
        if item.kind is DiffKind.MODIFY:
            output.write(f"        <span class='original'>{escape(item.original_content or '')}</span>\n")
            output.write("        <span class='arrow'>&rarr;</span>\n")
        output.write(f"        <span class='line-text'>{escape(item.content)}</span>\n")
        output.write("      </div>\n")

    def _get_css(self) -> str:
        """Get CSS styles for the HTML output."""
        return f"""
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }}
        .container {{
            background-color: white;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
            overflow: hidden;
        }}
        .header {{
            padding: 30px;
            border-bottom: 3px solid #3498db;
        }}
        .header h1 {{
            color: #2c3e50;
            margin: 0 0 10px 0;
        }}
        .timestamp {{
            font-size: 14px;
            color: #666;
        }}
        .stats {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
            gap: 20px;
            padding: 30px;
            background: #fafafa;
            border-bottom: 1px solid #e0e0e0;
        }}
        .stat-item {{
            text-align: center;
        }}
        .stat-value {{
            font-size: 20px;
            font-weight: bold;
            color: #2c3e50;
        }}
        .stat-label {{
            font-size: 12px;
            color: #666;
            text-transform: uppercase;
        }}
        .diff-content {{
            padding: 30px;
            font-family: 'Courier New', Courier, monospace;
            font-size: 14px;
        }}
        .diff-item {{
            margin: 6px 0;
            padding: 6px 10px;
            border-radius: 4px;
            border-left: 3px solid transparent;
            white-space: pre-wrap;
            word-break: break-word;
        }}
        .diff-add {{
            background: #e6ffed;
            border-left-color: {self.options.add_color};
        }}
        .diff-remove {{
            background: #ffebe9;
            border-left-color: {self.options.remove_color};
            text-decoration: line-through;
        }}
        .diff-modify {{
            background: #e0f2fe;
            border-left-color: {self.options.modify_color};
        }}
        .diff-modify .original {{
            color: {self.options.remove_color};
            text-decoration: line-through;
        }}
        .diff-equal {{
            color: #666;
            opacity: 0.7;
        }}
        .line-number {{
            display: inline-block;
            width: 50px;
            color: #999;
            text-align: right;
            margin-right: 10px;
            user-select: none;
        }}
        """
