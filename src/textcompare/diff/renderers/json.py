#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/json.py
"""JSON diff renderer for structured output.

The document has three members: ``metadata`` (timestamp, version and
generator), ``stats`` (or ``null`` when statistics are excluded) and
``differences``, the serialized items.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict

from textcompare.constants import REPORT_GENERATOR, REPORT_VERSION
from textcompare.diff.renderers.common import select_items
from textcompare.models import DiffResult
from textcompare.options import ExportOptions


class JsonDiffRenderer:
    """Render a diff result as structured JSON.

    Parameters
    ----------
    options : ExportOptions, optional
        Report options; only ``include_stats``, ``include_timestamp`` and
        ``include_equal`` apply
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    Examples
    --------
    >>> from textcompare import compute_diff
    >>> renderer = JsonDiffRenderer()
    >>> payload = renderer.render(compute_diff("old text", "new text"))

    """

    def __init__(
        self,
        options: ExportOptions | None = None,
        pretty_print: bool = True,
        indent: int = 2,
    ):
        """Initialize the JSON diff renderer."""
        self.options = options or ExportOptions(format="json")
        self.pretty_print = pretty_print
        self.indent = indent

    def build_payload(self, result: DiffResult) -> Dict[str, Any]:
        """Build the JSON-serializable report structure."""
        timestamp = datetime.now().astimezone().isoformat() if self.options.include_timestamp else None
        return {
            "metadata": {
                "timestamp": timestamp,
                "version": REPORT_VERSION,
                "generator": REPORT_GENERATOR,
            },
            "stats": result.stats.to_dict() if self.options.include_stats else None,
            "differences": [item.to_dict() for item in select_items(result, self.options)],
        }

    def render(self, result: DiffResult) -> str:
        """Render the diff result to a JSON string."""
        payload = self.build_payload(result)
        if self.pretty_print:
            return json.dumps(payload, indent=self.indent, ensure_ascii=False)
        return json.dumps(payload, ensure_ascii=False)
