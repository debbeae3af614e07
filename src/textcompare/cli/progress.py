#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/cli/progress.py
"""Progress tracking and summary rendering for the CLI.

Streaming comparisons report one step per chunk. Both helpers render
with rich on a terminal and fall back to plain lines on stderr otherwise.
"""

from __future__ import annotations

import sys
from typing import Any

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from textcompare.models import DiffStats


class ProgressContext:
    """Progress context for rich or plain output.

    Parameters
    ----------
    use_rich : bool
        Whether to draw a rich progress bar
    use_progress : bool
        Whether to show progress at all
    total : int
        Total number of steps
    description : str
        Description for progress bar

    Examples
    --------
    >>> with ProgressContext(use_rich=True, use_progress=True, total=3, description="Comparing") as progress:
    ...     for chunk in compute_diff_stream(left, right):
    ...         progress.update()

    """

    def __init__(self, use_rich: bool, use_progress: bool, total: int, description: str):
        """Initialize progress context."""
        self.use_rich = use_rich
        self.use_progress = use_progress
        self.total = total
        self.description = description

        self._progress_obj: Progress | None = None
        self._task_id: Any = None
        self._console: Console | None = None
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def __enter__(self) -> ProgressContext:
        """Enter context manager and initialize progress tracking."""
        if not self.use_progress:
            return self

        if self.use_rich:
            self._console = Console(stderr=True)
            self._progress_obj = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=self._console,
                transient=True,
            )
            self._progress_obj.__enter__()
            self._task_id = self._progress_obj.add_task(f"[cyan]{self.description}...", total=self.total)
        else:
            print(f"{self.description} ({self.total} chunks)...", file=sys.stderr)

        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context manager and cleanup progress tracking."""
        if self._progress_obj is not None:
            self._progress_obj.__exit__(exc_type, exc_val, exc_tb)
            self._progress_obj = None

    def update(self, advance: int = 1) -> None:
        """Advance progress by ``advance`` steps."""
        self._current += advance
        if self._progress_obj is not None:
            self._progress_obj.update(self._task_id, advance=advance)


class SummaryRenderer:
    """Render comparison summary tables in rich or plain text.

    Parameters
    ----------
    use_rich : bool
        Whether to use rich for table rendering

    """

    def __init__(self, use_rich: bool):
        """Initialize summary renderer."""
        self.use_rich = use_rich
        self._console = Console(stderr=True) if use_rich else None

    def render_diff_summary(self, stats: DiffStats, title: str = "Comparison Summary") -> None:
        """Render the statistics of a comparison.

        Parameters
        ----------
        stats : DiffStats
            Statistics to show
        title : str, default="Comparison Summary"
            Table title

        """
        rows = [
            ("Total changes", str(stats.total_changes)),
            ("+ Additions", f"{stats.additions} ({stats.added_words} words)"),
            ("- Deletions", f"{stats.deletions} ({stats.deleted_words} words)"),
            ("~ Modifications", str(stats.modifications)),
            ("Similarity", f"{stats.similarity:.2f}%"),
        ]
        self.render_two_column_table(rows, title=title, col1_header="Metric", col2_header="Value")

    def render_two_column_table(
        self, rows: list[tuple[str, str]], title: str, col1_header: str = "Item", col2_header: str = "Status"
    ) -> None:
        """Render a generic two-column table."""
        if self._console is not None:
            table = Table(title=title)
            table.add_column(col1_header, style="cyan", no_wrap=True)
            table.add_column(col2_header, style="magenta")

            for col1, col2 in rows:
                table.add_row(col1, col2)

            self._console.print(table)
        else:
            print(f"\n{title}", file=sys.stderr)
            print("=" * 40, file=sys.stderr)
            for col1, col2 in rows:
                print(f"  {col1:20} {col2}", file=sys.stderr)


__all__ = ["ProgressContext", "SummaryRenderer"]
