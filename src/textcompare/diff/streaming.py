#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/streaming.py
"""Line-bounded windows over two inputs for incremental comparison."""

from __future__ import annotations

import math
from typing import Iterator

from textcompare.exceptions import ValidationError
from textcompare.models import TextChunk


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, dropping a trailing ``\\r`` per line.

    A final line terminator does not start an extra empty line, and the
    empty string has no lines.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def count_chunks(left_line_count: int, right_line_count: int, chunk_size: int) -> int:
    """Number of windows needed to cover the longer of the two inputs."""
    return math.ceil(max(left_line_count, right_line_count) / chunk_size)


def validate_chunk_size(chunk_size: int) -> None:
    """Reject anything but a positive integer.

    Raises
    ------
    ValidationError
        If ``chunk_size`` is not a positive integer

    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1:
        raise ValidationError(
            f"chunk_size must be a positive integer, got {chunk_size!r}",
            parameter_name="chunk_size",
            parameter_value=chunk_size,
        )


def split_into_chunks(left: str, right: str, chunk_size: int) -> Iterator[TextChunk]:
    """Return aligned line windows of ``left`` and ``right``.

    Window ``i`` covers lines ``[i * chunk_size, (i + 1) * chunk_size)`` of
    the longer input. Each side is clamped to its own length, so a shorter
    side contributes an empty string once its lines run out.

    Parameters
    ----------
    left : str
        Left text
    right : str
        Right text
    chunk_size : int
        Lines per window, at least 1

    Returns
    -------
    Iterator[TextChunk]
        Lazy windows in ascending index order; lines are rejoined with ``"\\n"``

    Raises
    ------
    ValidationError
        If ``chunk_size`` is not a positive integer (raised immediately,
        not on first iteration)

    """
    validate_chunk_size(chunk_size)
    return _iter_chunks(split_lines(left), split_lines(right), chunk_size)


def _iter_chunks(left_lines: list[str], right_lines: list[str], chunk_size: int) -> Iterator[TextChunk]:
    total_lines = max(len(left_lines), len(right_lines))
    total_chunks = count_chunks(len(left_lines), len(right_lines), chunk_size)

    for index in range(total_chunks):
        start = index * chunk_size
        end = min(start + chunk_size, total_lines)
        yield TextChunk(
            index=index,
            total=total_chunks,
            left="\n".join(left_lines[start:end]),
            right="\n".join(right_lines[start:end]),
            start_line=start,
            end_line=end,
        )
