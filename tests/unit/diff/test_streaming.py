"""Unit tests for line-window streaming."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textcompare.diff.streaming import count_chunks, split_into_chunks, split_lines, validate_chunk_size
from textcompare.exceptions import ValidationError


@pytest.mark.unit
class TestSplitLines:
    """Tests for split_lines function."""

    def test_empty(self):
        """Test the empty string has no lines."""
        assert split_lines("") == []

    def test_trailing_newline(self):
        """Test a final newline does not add an empty line."""
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_no_trailing_newline(self):
        """Test the last line without a newline is kept."""
        assert split_lines("a\nb") == ["a", "b"]

    def test_crlf(self):
        """Test carriage returns before newlines are removed."""
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_blank_lines_kept(self):
        """Test interior blank lines are kept."""
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_single_newline(self):
        """Test a lone newline is one empty line."""
        assert split_lines("\n") == [""]


@pytest.mark.unit
class TestValidateChunkSize:
    """Tests for validate_chunk_size function."""

    @pytest.mark.parametrize("value", [0, -1, 1.5, "10", True, None])
    def test_rejects_invalid(self, value):
        """Test non-positive and non-integer values are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_chunk_size(value)
        assert exc_info.value.parameter_name == "chunk_size"

    def test_accepts_positive(self):
        """Test a positive integer passes."""
        validate_chunk_size(1)


@pytest.mark.unit
class TestSplitIntoChunks:
    """Tests for split_into_chunks function."""

    def test_five_lines_in_windows_of_two(self):
        """Test five identical lines make three windows, the last with one line."""
        text = "l1\nl2\nl3\nl4\nl5"
        chunks = list(split_into_chunks(text, text, 2))

        assert [chunk.index for chunk in chunks] == [0, 1, 2]
        assert all(chunk.total == 3 for chunk in chunks)
        assert chunks[0].left == "l1\nl2"
        assert (chunks[-1].start_line, chunks[-1].end_line) == (4, 5)
        assert chunks[-1].left == "l5"

    def test_sides_clamped_independently(self):
        """Test the shorter side contributes empty text once its lines run out."""
        chunks = list(split_into_chunks("a", "a\nb\nc", 1))
        assert len(chunks) == 3
        assert [chunk.left for chunk in chunks] == ["a", "", ""]
        assert [chunk.right for chunk in chunks] == ["a", "b", "c"]

    def test_empty_inputs_yield_nothing(self):
        """Test two empty inputs give no windows."""
        assert list(split_into_chunks("", "", 3)) == []

    def test_invalid_chunk_size_raises_immediately(self):
        """Test the size is checked before iteration starts."""
        with pytest.raises(ValidationError):
            split_into_chunks("a", "b", 0)

    def test_lazy(self):
        """Test windows are produced on demand."""
        chunks = split_into_chunks("a\nb\nc", "a\nb\nc", 1)
        assert next(chunks).index == 0
        assert next(chunks).index == 1

    @given(
        st.lists(st.text(alphabet="ab ", max_size=5), max_size=20),
        st.lists(st.text(alphabet="ab ", max_size=5), max_size=20),
        st.integers(min_value=1, max_value=7),
    )
    def test_chunk_coverage(self, left_lines, right_lines, chunk_size):
        """Test the window count, indices and totals for any line lists."""
        left = "\n".join(left_lines)
        right = "\n".join(right_lines)
        total_lines = max(len(split_lines(left)), len(split_lines(right)))

        chunks = list(split_into_chunks(left, right, chunk_size))

        assert len(chunks) == math.ceil(total_lines / chunk_size)
        assert [chunk.index for chunk in chunks] == list(range(len(chunks)))
        assert all(chunk.total == len(chunks) for chunk in chunks)
        assert count_chunks(len(split_lines(left)), len(split_lines(right)), chunk_size) == len(chunks)
