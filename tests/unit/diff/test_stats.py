"""Unit tests for diff statistics."""

import pytest

from textcompare.diff.items import make_item
from textcompare.diff.stats import calculate_similarity, calculate_stats, count_words
from textcompare.models import DiffKind, DiffStats


def _item(number, kind, content, original=None):
    return make_item(number, kind, number, content, original)


@pytest.mark.unit
class TestCountWords:
    """Tests for count_words function."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", 0),
            ("   ", 0),
            ("one", 1),
            ("one two  three", 3),
            ("line one\nline two", 4),
            ("这是第二段。", 1),
            ("a\x1fb c", 2),
        ],
    )
    def test_counts(self, text, expected):
        """Test whitespace-delimited word counts."""
        assert count_words(text) == expected


@pytest.mark.unit
class TestCalculateSimilarity:
    """Tests for calculate_similarity function."""

    def test_both_empty(self):
        """Test two empty inputs are fully similar."""
        assert calculate_similarity([], "", "") == 100.0

    def test_no_changes(self):
        """Test equal items do not lower similarity."""
        items = [_item(0, DiffKind.EQUAL, "a")]
        assert calculate_similarity(items, "a", "a") == 100.0

    def test_uses_longer_side(self):
        """Test the longer input sets the denominator."""
        items = [_item(0, DiffKind.ADD, "xy")]
        assert calculate_similarity(items, "ab", "abxy") == pytest.approx(50.0)

    def test_counts_utf8_bytes(self):
        """Test multi-byte characters weigh their encoded length."""
        items = [_item(0, DiffKind.ADD, "é")]
        # "é" is 2 bytes of the 3-byte right side
        assert calculate_similarity(items, "a", "aé") == pytest.approx(100 / 3)

    def test_clamped_at_zero(self):
        """Test changes longer than the inputs give zero, not a negative value."""
        items = [_item(0, DiffKind.REMOVE, "abc", "abc"), _item(1, DiffKind.ADD, "xyz")]
        assert calculate_similarity(items, "abc", "xyz") == 0.0


@pytest.mark.unit
class TestCalculateStats:
    """Tests for calculate_stats function."""

    def test_empty(self):
        """Test an empty diff gives default statistics."""
        assert calculate_stats([], "", "") == DiffStats()

    def test_counts_by_kind(self):
        """Test additions, deletions and modifications are counted."""
        items = [
            _item(0, DiffKind.EQUAL, "same"),
            _item(1, DiffKind.ADD, "new words here"),
            _item(2, DiffKind.REMOVE, "old text", "old text"),
            _item(3, DiffKind.MODIFY, "changed line", "original"),
        ]
        stats = calculate_stats(items, "same old text original", "same new words here changed line")

        assert stats.additions == 1
        assert stats.deletions == 1
        assert stats.modifications == 1
        assert stats.total_changes == 3
        assert stats.added_words == 5
        assert stats.deleted_words == 3

    def test_modify_counts_new_side_for_similarity(self):
        """Test a modification contributes its new content to the changed amount."""
        items = [_item(0, DiffKind.EQUAL, "ab"), _item(1, DiffKind.MODIFY, "cd", "c")]
        stats = calculate_stats(items, "abc", "abcd")
        assert stats.similarity == pytest.approx(50.0)
