"""Data models for classified diff output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    DIFF_HEADER = "diff_header"
    HUNK_HEADER = "hunk_header"
    ADDED = "added"
    DELETED = "deleted"
    CONTEXT = "context"
    NO_NEWLINE = "no_newline"
    FILE_HEADER = "file_header"
    SIDE_BY_SIDE = "side_by_side"


class ColumnKind(str, Enum):
    """Content of one column in a side-by-side row."""

    EMPTY = "empty"
    CONTEXT = "context"
    ADDED = "added"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class HunkInfo:
    """Ranges from an ``@@ -a,b +c,d @@`` header."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A single line of diff output after classification.

    ``text`` never carries the one-character ``+``/``-``/`` `` prefix of
    added, deleted and context lines.
    """

    kind: LineKind
    text: str
    hunk_info: Optional[HunkInfo] = None  # HUNK_HEADER only, when parseable
    # SIDE_BY_SIDE only
    left_kind: Optional[ColumnKind] = None
    right_kind: Optional[ColumnKind] = None
    column_width: Optional[int] = None
    separator_offset: Optional[int] = None


@dataclass(slots=True)
class DiffStats:
    """Aggregate counts gathered while parsing."""

    hunks: int = 0
    added: int = 0
    deleted: int = 0

    def summary(self) -> dict[str, int]:
        """Return the ``{added, deleted, changed}`` view used by pickers."""
        return {"added": self.added, "deleted": self.deleted, "changed": self.hunks}
