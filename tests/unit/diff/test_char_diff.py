"""Unit tests for the character-level LCS diff."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textcompare.diff.char_diff import char_diff, lcs_table
from textcompare.models import DiffKind, Position


def _side(items, kinds):
    return "".join(item.content for item in items if item.kind in kinds)


def _left(items):
    return _side(items, (DiffKind.EQUAL, DiffKind.REMOVE))


def _right(items):
    return _side(items, (DiffKind.EQUAL, DiffKind.ADD))


@pytest.mark.unit
class TestLcsTable:
    """Tests for lcs_table function."""

    def test_table_dimensions(self):
        """Test the flat table has (m+1) * (n+1) cells."""
        table = lcs_table("abc", "ab")
        assert len(table) == 4 * 3

    def test_final_cell_is_lcs_length(self):
        """Test the bottom-right cell holds the LCS length."""
        table = lcs_table("ABCBDAB", "BDCABA")
        assert table[-1] == 4

    def test_first_row_and_column_are_zero(self):
        """Test the border cells are zero."""
        left, right = "xyz", "zyx"
        width = len(right) + 1
        table = lcs_table(left, right)
        assert all(table[j] == 0 for j in range(width))
        assert all(table[i * width] == 0 for i in range(len(left) + 1))

    def test_empty_inputs(self):
        """Test an empty pair gives a single zero cell."""
        assert list(lcs_table("", "")) == [0]


@pytest.mark.unit
class TestCharDiff:
    """Tests for char_diff function."""

    def test_identical_strings(self):
        """Test identical strings give one equal item per character."""
        items = char_diff("abc", "abc")
        assert [item.kind for item in items] == [DiffKind.EQUAL] * 3
        assert [item.content for item in items] == ["a", "b", "c"]

    def test_empty_strings(self):
        """Test two empty strings give no items."""
        assert char_diff("", "") == []

    def test_only_additions(self):
        """Test an empty left side gives only additions."""
        items = char_diff("", "ab")
        assert [item.kind for item in items] == [DiffKind.ADD, DiffKind.ADD]
        assert [item.line_number for item in items] == [1, 2]
        assert all(item.original_content is None for item in items)

    def test_only_removals(self):
        """Test an empty right side gives only removals."""
        items = char_diff("ab", "")
        assert [item.kind for item in items] == [DiffKind.REMOVE, DiffKind.REMOVE]
        assert all(item.original_content == item.content for item in items)

    def test_substitution_at_end(self):
        """Test the removal precedes the addition after a shared prefix."""
        items = char_diff("abc", "abd")
        assert [(item.kind, item.content) for item in items] == [
            (DiffKind.EQUAL, "a"),
            (DiffKind.EQUAL, "b"),
            (DiffKind.REMOVE, "c"),
            (DiffKind.ADD, "d"),
        ]

    def test_tie_prefers_addition_during_backtrace(self):
        """Test equal neighbour cells make the backtrace take the addition branch."""
        items = char_diff("ab", "ba")
        assert [(item.kind, item.content) for item in items] == [
            (DiffKind.REMOVE, "a"),
            (DiffKind.EQUAL, "b"),
            (DiffKind.ADD, "a"),
        ]

    def test_positions_index_originating_side(self):
        """Test add items index the right side and the rest index the left side."""
        items = char_diff("abc", "abd")
        added = [item for item in items if item.kind is DiffKind.ADD][0]
        removed = [item for item in items if item.kind is DiffKind.REMOVE][0]
        assert added.position == Position(2, 3)
        assert added.line_number == 3
        assert removed.position == Position(2, 3)
        assert removed.line_number == 3

    def test_ids_increase_left_to_right(self):
        """Test ids are assigned in output order."""
        items = char_diff("kitten", "sitting")
        assert [item.id for item in items] == [f"diff-{n}" for n in range(len(items))]

    def test_cjk_characters(self):
        """Test multi-byte characters are compared as single units."""
        items = char_diff("你好", "你们好")
        assert [(item.kind, item.content) for item in items] == [
            (DiffKind.EQUAL, "你"),
            (DiffKind.ADD, "们"),
            (DiffKind.EQUAL, "好"),
        ]


@pytest.mark.unit
class TestLinearSpaceFallback:
    """Tests for the linear-space alignment used above the cell limit."""

    def test_small_limit_uses_fallback(self, caplog):
        """Test exceeding the cell limit logs the fallback."""
        with caplog.at_level("DEBUG", logger="textcompare.diff.char_diff"):
            char_diff("hello world", "hello rust", max_cells=10)
        assert "linear-space" in caplog.text

    def test_fallback_reconstructs_both_sides(self):
        """Test the fallback script rebuilds both inputs."""
        items = char_diff("the quick brown fox", "a quick red fox jumps", max_cells=1)
        assert _left(items) == "the quick brown fox"
        assert _right(items) == "a quick red fox jumps"

    def test_fallback_matches_table_on_identical_input(self):
        """Test identical input aligns identically on both strategies."""
        assert char_diff("abcabc", "abcabc", max_cells=1) == char_diff("abcabc", "abcabc")

    @given(st.text(alphabet="abc", max_size=25), st.text(alphabet="abc", max_size=25))
    def test_same_lcs_length_as_table(self, left, right):
        """Test both strategies keep the same number of equal characters."""
        table_items = char_diff(left, right)
        linear_items = char_diff(left, right, max_cells=1)

        def equal_count(items):
            return sum(1 for item in items if item.kind is DiffKind.EQUAL)

        assert equal_count(linear_items) == equal_count(table_items)
        assert _left(linear_items) == left
        assert _right(linear_items) == right


@pytest.mark.unit
class TestCharDiffProperties:
    """Property-based tests for the table strategy."""

    @given(st.text(max_size=40), st.text(max_size=40))
    def test_reconstructs_both_sides(self, left, right):
        """Test equal and remove items rebuild the left side, equal and add the right."""
        items = char_diff(left, right)
        assert _left(items) == left
        assert _right(items) == right

    @given(st.text(max_size=40), st.text(max_size=40))
    def test_equal_count_is_lcs_length(self, left, right):
        """Test the number of equal items equals the LCS length."""
        items = char_diff(left, right)
        assert sum(1 for item in items if item.kind is DiffKind.EQUAL) == lcs_table(left, right)[-1]
