#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/__init__.py
"""Report renderers for diff results.

Available Renderers
-------------------
- HtmlDiffRenderer: Standalone HTML page with colored change blocks
- JsonDiffRenderer: Structured JSON output for programmatic access
- MarkdownDiffRenderer: Markdown report with statistics table
- TextDiffRenderer: Plain-text report, optionally colorized for terminals

Examples
--------
Render a diff as HTML:
    >>> from textcompare import compute_diff
    >>> from textcompare.options import ExportOptions
    >>> from textcompare.diff.renderers import render_diff
    >>> html = render_diff(compute_diff(old, new), ExportOptions(format="html"))

"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from textcompare.diff.renderers.html import HtmlDiffRenderer
from textcompare.diff.renderers.json import JsonDiffRenderer
from textcompare.diff.renderers.markdown import MarkdownDiffRenderer
from textcompare.diff.renderers.text import TextDiffRenderer
from textcompare.exceptions import OutputWriteError
from textcompare.models import DiffResult
from textcompare.options import ExportOptions


def render_diff(result: DiffResult, options: ExportOptions | None = None, use_color: bool = False) -> str:
    """Render a diff result in the format selected by ``options.format``.

    Parameters
    ----------
    result : DiffResult
        Diff to render
    options : ExportOptions, optional
        Report options; defaults to a plain-text report
    use_color : bool, default False
        Add ANSI colors (text format only)

    Returns
    -------
    str
        Rendered report

    """
    options = options or ExportOptions()
    if options.format == "html":
        return HtmlDiffRenderer(options).render(result)
    if options.format == "json":
        return JsonDiffRenderer(options).render(result)
    if options.format == "markdown":
        return MarkdownDiffRenderer(options).render(result)
    return TextDiffRenderer(options, use_color=use_color).render(result)


def render_to_file(result: DiffResult, output_path: Union[str, Path], options: ExportOptions | None = None) -> None:
    """Render a diff result and write it to ``output_path`` as UTF-8.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    rendered = render_diff(result, options)
    try:
        Path(output_path).write_text(rendered, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(
            f"Could not write report to {output_path}: {e}", output_path=str(output_path), original_error=e
        ) from e


__all__ = [
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
    "MarkdownDiffRenderer",
    "TextDiffRenderer",
    "render_diff",
    "render_to_file",
]
