"""Unit tests for CLI progress tracking and summary tables."""

import pytest

from textcompare.cli.progress import ProgressContext, SummaryRenderer
from textcompare.models import DiffStats

pytestmark = [pytest.mark.unit, pytest.mark.cli]


class TestProgressContext:
    """Test ProgressContext in its output modes."""

    def test_disabled(self, capsys):
        """Test nothing is printed when progress is off."""
        with ProgressContext(use_rich=False, use_progress=False, total=3, description="Comparing") as progress:
            progress.update()
        assert progress.current == 1
        assert capsys.readouterr().err == ""

    def test_plain(self, capsys):
        """Test plain mode announces the work on stderr."""
        with ProgressContext(use_rich=False, use_progress=True, total=2, description="Comparing") as progress:
            progress.update(2)
        assert "Comparing (2 chunks)..." in capsys.readouterr().err
        assert progress.current == 2

    def test_rich(self):
        """Test rich mode tracks the bar and cleans up on exit."""
        with ProgressContext(use_rich=True, use_progress=True, total=4, description="Comparing") as progress:
            for _ in range(4):
                progress.update()
        assert progress.current == 4
        assert progress._progress_obj is None


class TestSummaryRenderer:
    """Test SummaryRenderer output."""

    def test_plain_summary(self, capsys):
        """Test the plain table lists every statistic."""
        stats = DiffStats(
            total_changes=3, additions=1, deletions=1, modifications=1, added_words=4, deleted_words=2, similarity=75.5
        )
        SummaryRenderer(use_rich=False).render_diff_summary(stats)
        err = capsys.readouterr().err
        assert "Comparison Summary" in err
        assert "1 (4 words)" in err
        assert "75.50%" in err

    def test_rich_summary(self, capsys):
        """Test the rich table renders to stderr."""
        SummaryRenderer(use_rich=True).render_diff_summary(DiffStats(), title="Totals")
        err = capsys.readouterr().err
        assert "Totals" in err
        assert "100.00%" in err
