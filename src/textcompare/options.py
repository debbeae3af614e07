#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/options.py
"""Option classes for the comparison engine and the report renderers.

Both classes are frozen dataclasses: an engine holds nothing but its
options, so sharing one engine between threads needs no locking. Use
``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

import json
import re
import sys
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from textcompare.constants import (
    DEFAULT_ADD_COLOR,
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_MAX_CHAR_DIFF_CELLS,
    DEFAULT_MODIFY_COLOR,
    DEFAULT_REMOVE_COLOR,
    DEFAULT_REPORT_TITLE,
    ExportFormatType,
)
from textcompare.exceptions import ConfigurationError

EXPORT_FORMATS: tuple[str, ...] = ("html", "json", "markdown", "text")

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning and mapping conversion."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Decode options from a mapping, validating every value.

        Missing keys take their defaults. Each field declares its expected
        Python type in its ``metadata["type"]``.

        Parameters
        ----------
        data : Mapping[str, Any]
            Option values keyed by field name

        Returns
        -------
        Self
            Decoded options instance

        Raises
        ------
        ConfigurationError
            If ``data`` is not a mapping, holds an unknown key, or a value
            has the wrong type or range

        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"{cls.__name__} must be decoded from a mapping, got {type(data).__name__}",
                value=data,
            )

        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigurationError(f"Unknown option for {cls.__name__}: {key!r}", key=key, value=value)
            expected = known[key].metadata.get("type")
            if expected is not None and not _matches_type(value, expected):
                raise ConfigurationError(
                    f"Option {key!r} must be of type {expected.__name__}, got {type(value).__name__}",
                    key=key,
                    value=value,
                )
            kwargs[key] = value

        try:
            return cls(**kwargs)
        except ValueError as e:
            raise ConfigurationError(str(e), original_error=e) from e

    @classmethod
    def from_json(cls, payload: str | bytes) -> Self:
        """Decode options from a JSON object string.

        Raises
        ------
        ConfigurationError
            If the payload is not valid JSON or does not decode to valid options

        """
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON for {cls.__name__}: {e}", original_error=e) from e
        return cls.from_dict(data)


def _matches_type(value: Any, expected: type) -> bool:
    # bool is an int subclass; keep the two apart in both directions
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Normalization and segmentation options for a comparison.

    Parameters
    ----------
    ignore_case : bool, default False
        Fold both inputs to lowercase before comparing
    ignore_whitespace : bool, default False
        Collapse whitespace runs to single spaces and trim
    ignore_punctuation : bool, default False
        Drop characters that are neither alphanumeric, whitespace nor CJK
    split_by_paragraph : bool, default False
        Compare segment by segment instead of character by character
    split_by_sentence : bool, default False
        Compare segment by segment instead of character by character
    use_web_worker : bool, default False
        Hint for hosting UIs; the engine ignores it
    max_char_diff_cells : int
        Largest LCS table, in cells, built in memory for the character
        path; larger comparisons use the linear-space alignment

    """

    ignore_case: bool = field(
        default=False,
        metadata={"help": "Ignore case differences", "type": bool},
    )
    ignore_whitespace: bool = field(
        default=False,
        metadata={"help": "Collapse whitespace runs and trim both inputs", "type": bool},
    )
    ignore_punctuation: bool = field(
        default=False,
        metadata={"help": "Ignore punctuation and symbols", "type": bool},
    )
    split_by_paragraph: bool = field(
        default=False,
        metadata={"help": "Compare paragraph-sized segments", "type": bool},
    )
    split_by_sentence: bool = field(
        default=False,
        metadata={"help": "Compare sentence-sized segments", "type": bool},
    )
    use_web_worker: bool = field(
        default=False,
        metadata={"help": "Host UI hint, not used by the engine", "type": bool},
    )
    max_char_diff_cells: int = field(
        default=DEFAULT_MAX_CHAR_DIFF_CELLS,
        metadata={"help": "Largest in-memory LCS table for character comparison", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``max_char_diff_cells`` is not positive.

        """
        if self.max_char_diff_cells <= 0:
            raise ValueError(f"max_char_diff_cells must be positive, got {self.max_char_diff_cells}")

    @property
    def segmented(self) -> bool:
        """Whether the comparison runs on segments rather than characters."""
        return self.split_by_paragraph or self.split_by_sentence


@dataclass(frozen=True)
class ExportOptions(CloneFrozenMixin):
    """Options controlling how a diff result is rendered as a report.

    Parameters
    ----------
    format : {"html", "json", "markdown", "text"}, default "text"
        Report format
    include_stats : bool, default True
        Include the statistics block
    include_timestamp : bool, default True
        Include the generation timestamp
    include_equal : bool, default False
        Include unchanged items next to the changes
    title : str
        Report title
    add_color, remove_color, modify_color : str
        ``#rrggbb`` colors used by the HTML report

    """

    format: ExportFormatType = field(
        default=DEFAULT_EXPORT_FORMAT,
        metadata={"help": "Report format: html, json, markdown or text", "type": str},
    )
    include_stats: bool = field(
        default=True,
        metadata={"help": "Include statistics in the report", "type": bool},
    )
    include_timestamp: bool = field(
        default=True,
        metadata={"help": "Include the generation timestamp", "type": bool},
    )
    include_equal: bool = field(
        default=False,
        metadata={"help": "Include unchanged content in the report", "type": bool},
    )
    title: str = field(
        default=DEFAULT_REPORT_TITLE,
        metadata={"help": "Report title", "type": str},
    )
    add_color: str = field(default=DEFAULT_ADD_COLOR, metadata={"help": "HTML color for additions", "type": str})
    remove_color: str = field(
        default=DEFAULT_REMOVE_COLOR, metadata={"help": "HTML color for deletions", "type": str}
    )
    modify_color: str = field(
        default=DEFAULT_MODIFY_COLOR, metadata={"help": "HTML color for modifications", "type": str}
    )

    def __post_init__(self) -> None:
        """Validate the format and colors.

        Raises
        ------
        ValueError
            If the format is unknown or a color is not ``#rrggbb``.

        """
        if self.format not in EXPORT_FORMATS:
            raise ValueError(f"format must be one of {', '.join(EXPORT_FORMATS)}, got {self.format!r}")
        for name in ("add_color", "remove_color", "modify_color"):
            value = getattr(self, name)
            if not _HEX_COLOR_RE.match(value):
                raise ValueError(f"{name} must be a #rrggbb color, got {value!r}")
