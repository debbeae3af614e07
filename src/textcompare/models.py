#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/models.py
"""Data model produced by the comparison engine.

Every record converts to and from plain dictionaries with the field names
used on the wire, so report exporters and persistence layers can rely on a
stable JSON shape. ``kind`` is serialized as its lowercase tag and absent
optional values as ``null``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from textcompare.exceptions import ValidationError


class DiffKind(str, Enum):
    """Kind of a diff item; the value is the serialized tag."""

    ADD = "add"
    REMOVE = "remove"
    MODIFY = "modify"
    EQUAL = "equal"


def _require(data: Mapping[str, Any], key: str, expected: type | tuple[type, ...], owner: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValidationError(f"{owner} payload must be an object, got {type(data).__name__}", parameter_value=data)
    if key not in data:
        raise ValidationError(f"{owner} payload is missing {key!r}", parameter_name=key)
    value = data[key]
    if isinstance(value, bool) and bool not in (expected if isinstance(expected, tuple) else (expected,)):
        raise ValidationError(f"{owner}.{key} has invalid type bool", parameter_name=key, parameter_value=value)
    if not isinstance(value, expected):
        raise ValidationError(
            f"{owner}.{key} has invalid type {type(value).__name__}", parameter_name=key, parameter_value=value
        )
    return value


def _optional(data: Mapping[str, Any], key: str, expected: type, owner: str) -> Any:
    if data.get(key) is None:
        return None
    return _require(data, key, expected, owner)


@dataclass(frozen=True, slots=True)
class Position:
    """Half-open ``[start, end)`` index range into the compared sequence."""

    start: int
    end: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Position:
        start = _require(data, "start", int, "Position")
        end = _require(data, "end", int, "Position")
        if end < start:
            raise ValidationError(f"Position end ({end}) precedes start ({start})", parameter_name="end")
        return cls(start, end)


@dataclass(frozen=True, slots=True)
class DiffItem:
    """A single typed difference record.

    Attributes
    ----------
    id : str
        Identifier unique within one result, e.g. ``"diff-3"``
    kind : DiffKind
        Add, remove, modify or equal
    content : str
        New text for add/modify/equal, removed text for remove
    original_content : str or None
        Replaced text for modify; equal to ``content`` for remove; ``None``
        for add and equal
    line_number : int or None
        1-based index into the side the item originates from
    position : Position
        Index range into the segment or character sequence

    """

    id: str
    kind: DiffKind
    content: str
    original_content: str | None
    line_number: int | None
    position: Position

    @property
    def is_change(self) -> bool:
        return self.kind is not DiffKind.EQUAL

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "content": self.content,
            "original_content": self.original_content,
            "line_number": self.line_number,
            "position": self.position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiffItem:
        raw_kind = _require(data, "kind", str, "DiffItem")
        try:
            kind = DiffKind(raw_kind)
        except ValueError as e:
            raise ValidationError(
                f"Unknown diff kind: {raw_kind!r}", parameter_name="kind", parameter_value=raw_kind, original_error=e
            ) from e

        content = _require(data, "content", str, "DiffItem")
        original_content = _optional(data, "original_content", str, "DiffItem")
        if kind is DiffKind.MODIFY and original_content is None:
            raise ValidationError("Modify items require original_content", parameter_name="original_content")
        if kind is DiffKind.REMOVE and original_content != content:
            raise ValidationError("Remove items must carry original_content equal to content")
        if kind in (DiffKind.ADD, DiffKind.EQUAL) and original_content is not None:
            raise ValidationError(f"{kind.value} items must not carry original_content")

        return cls(
            id=_require(data, "id", str, "DiffItem"),
            kind=kind,
            content=content,
            original_content=original_content,
            line_number=_optional(data, "line_number", int, "DiffItem"),
            position=Position.from_dict(_require(data, "position", Mapping, "DiffItem")),
        )


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Aggregate counts over a diff item sequence."""

    total_changes: int = 0
    additions: int = 0
    deletions: int = 0
    modifications: int = 0
    added_words: int = 0
    deleted_words: int = 0
    similarity: float = 100.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_changes": self.total_changes,
            "additions": self.additions,
            "deletions": self.deletions,
            "modifications": self.modifications,
            "added_words": self.added_words,
            "deleted_words": self.deleted_words,
            "similarity": self.similarity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiffStats:
        counts = {
            key: _require(data, key, int, "DiffStats")
            for key in ("total_changes", "additions", "deletions", "modifications", "added_words", "deleted_words")
        }
        similarity = float(_require(data, "similarity", (int, float), "DiffStats"))
        return cls(similarity=similarity, **counts)


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Ordered diff items plus their statistics."""

    items: list[DiffItem] = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)

    @property
    def changes(self) -> list[DiffItem]:
        """Items that are not equal."""
        return [item for item in self.items if item.is_change]

    @property
    def has_changes(self) -> bool:
        return any(item.is_change for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items], "stats": self.stats.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiffResult:
        items = [DiffItem.from_dict(item) for item in _require(data, "items", list, "DiffResult")]
        return cls(items=items, stats=DiffStats.from_dict(_require(data, "stats", Mapping, "DiffResult")))

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str | bytes) -> DiffResult:
        return cls.from_dict(_load_json(payload, "DiffResult"))


@dataclass(frozen=True, slots=True)
class TextChunk:
    """Line-bounded slice of both inputs, used only while streaming."""

    index: int
    total: int
    left: str
    right: str
    start_line: int
    end_line: int


@dataclass(frozen=True, slots=True)
class DiffChunk:
    """Diff of one streaming window.

    ``stats`` covers this window only, not a running total.
    """

    index: int
    total: int
    items: list[DiffItem]
    stats: DiffStats

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "total": self.total,
            "items": [item.to_dict() for item in self.items],
            "stats": self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiffChunk:
        index = _require(data, "index", int, "DiffChunk")
        total = _require(data, "total", int, "DiffChunk")
        if not 0 <= index < total:
            raise ValidationError(f"Chunk index {index} outside 0..{total - 1}", parameter_name="index")
        items = [DiffItem.from_dict(item) for item in _require(data, "items", list, "DiffChunk")]
        return cls(
            index=index,
            total=total,
            items=items,
            stats=DiffStats.from_dict(_require(data, "stats", Mapping, "DiffChunk")),
        )

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str | bytes) -> DiffChunk:
        return cls.from_dict(_load_json(payload, "DiffChunk"))


@dataclass(frozen=True, slots=True)
class NavigationItem:
    """Jump target for one change, with a short content preview."""

    id: str
    kind: DiffKind
    line_number: int
    preview: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "kind": self.kind.value, "line_number": self.line_number, "preview": self.preview}


def _load_json(payload: str | bytes, owner: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON for {owner}: {e}", original_error=e) from e
