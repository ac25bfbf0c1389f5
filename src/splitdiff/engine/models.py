#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/engine/models.py
"""Plain data types passed between the stages of the diff pipeline.

Every type here is an immutable dataclass. Instances are rebuilt from
scratch on each comparison and carry no behaviour beyond small accessors
and ``to_dict()`` serialisation for renderers and snapshot tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from splitdiff.constants import OpKind


@dataclass(frozen=True, slots=True)
class Line:
    """One row of tokenized input text.

    Parameters
    ----------
    index : int
        0-based position in the source sequence
    text : str
        Raw line content without its line terminator

    """

    index: int
    text: str


@dataclass(frozen=True, slots=True)
class AlignmentOp:
    """One step of an alignment between two line sequences.

    ``match`` ops carry both lines, ``delete`` ops only the original line
    and ``insert`` ops only the modified line.
    """

    kind: OpKind
    original: Optional[Line] = None
    modified: Optional[Line] = None

    @classmethod
    def match(cls, original: Line, modified: Line) -> AlignmentOp:
        """Create a match op pairing two equal lines."""
        return cls("match", original, modified)

    @classmethod
    def delete(cls, original: Line) -> AlignmentOp:
        """Create a delete op consuming one original line."""
        return cls("delete", original, None)

    @classmethod
    def insert(cls, modified: Line) -> AlignmentOp:
        """Create an insert op consuming one modified line."""
        return cls("insert", None, modified)

    @property
    def original_index(self) -> Optional[int]:
        """0-based index into the original sequence, if any."""
        return self.original.index if self.original is not None else None

    @property
    def modified_index(self) -> Optional[int]:
        """0-based index into the modified sequence, if any."""
        return self.modified.index if self.modified is not None else None

    def to_dict(self) -> dict[str, Any]:
        """Serialise the op to plain data."""
        return {
            "kind": self.kind,
            "original_index": self.original_index,
            "modified_index": self.modified_index,
        }


class LineType(str, Enum):
    """Classification of a displayed line."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True, slots=True)
class DiffLine:
    """A classified, display-ready line on one side of the comparison.

    Parameters
    ----------
    line_number : int
        1-based position within this side
    content : str
        The line text; an empty string is a real, empty line
    type : LineType
        Classification of the line
    counterpart : int, optional
        Line number of the corresponding line on the opposite side. Set for
        unchanged and modified lines, ``None`` for added and removed lines.

    """

    line_number: int
    content: str
    type: LineType
    counterpart: Optional[int] = None

    @property
    def is_change(self) -> bool:
        """True for any line that is not unchanged."""
        return self.type is not LineType.UNCHANGED

    def to_dict(self) -> dict[str, Any]:
        """Serialise the line to plain data."""
        return {
            "line_number": self.line_number,
            "content": self.content,
            "type": self.type.value,
            "counterpart": self.counterpart,
        }


@dataclass(frozen=True, slots=True)
class Section:
    """A named, collapsible run of consecutive lines on one side."""

    id: str
    title: str
    lines: tuple[DiffLine, ...]
    has_changes: bool

    @property
    def first_line_number(self) -> int:
        return self.lines[0].line_number

    @property
    def last_line_number(self) -> int:
        return self.lines[-1].line_number

    def to_dict(self) -> dict[str, Any]:
        """Serialise the section and its lines to plain data."""
        return {
            "id": self.id,
            "title": self.title,
            "has_changes": self.has_changes,
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True, slots=True)
class DiffRow:
    """One side-by-side display row.

    Either side may be ``None`` when the other side has a line with no
    counterpart (a pure addition or removal).
    """

    original: Optional[DiffLine]
    modified: Optional[DiffLine]

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original.to_dict() if self.original is not None else None,
            "modified": self.modified.to_dict() if self.modified is not None else None,
        }


@dataclass(frozen=True, slots=True)
class DiffStatistics:
    """Line counts for both sides of a comparison."""

    unchanged: int
    added: int
    removed: int
    modified: int
    original_line_count: int
    modified_line_count: int

    @property
    def total_changes(self) -> int:
        """Number of changed lines across both sides, a modified pair counting twice."""
        return self.added + self.removed + 2 * self.modified

    @property
    def has_changes(self) -> bool:
        return self.total_changes > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "unchanged": self.unchanged,
            "added": self.added,
            "removed": self.removed,
            "modified": self.modified,
            "original_line_count": self.original_line_count,
            "modified_line_count": self.modified_line_count,
            "total_changes": self.total_changes,
        }
