"""Side-by-side layout — pairs deleted/added lines into two-column rows."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from rich.cells import set_cell_size

from diffpane.diff.models import ClassifiedLine, ColumnKind, LineKind

logger = logging.getLogger(__name__)

SEPARATOR = " │ "
SEPARATOR_WIDTH = len(SEPARATOR)


def column_width_for(window_width: Optional[int]) -> Optional[int]:
    """Cells per column for *window_width*, or None when too narrow to split."""
    if window_width is None:
        return None
    width = (window_width - SEPARATOR_WIDTH) // 2
    return width if width > 0 else None


def _cell(text: str, width: int) -> str:
    """Truncate or pad *text* to exactly *width* display cells."""
    return set_cell_size(text.expandtabs(4), width)


def _row(
    left: str,
    left_kind: ColumnKind,
    right: str,
    right_kind: ColumnKind,
    width: int,
) -> ClassifiedLine:
    left_cell = _cell(left, width)
    return ClassifiedLine(
        LineKind.SIDE_BY_SIDE,
        left_cell + SEPARATOR + _cell(right, width),
        left_kind=left_kind,
        right_kind=right_kind,
        column_width=width,
        separator_offset=len(left_cell),
    )


def to_side_by_side(lines: Sequence[ClassifiedLine], window_width: int) -> List[ClassifiedLine]:
    """Convert an inline sequence into side-by-side rows.

    A deleted line pairs with the added line right after it, if any.
    Header, marker and file header lines pass through untouched. Returns
    the input unchanged when the window is too narrow for two columns.
    """
    width = column_width_for(window_width)
    if width is None:
        logger.debug("Window width %s too narrow for side-by-side", window_width)
        return list(lines)

    result: List[ClassifiedLine] = []
    idx = 0
    total = len(lines)
    while idx < total:
        line = lines[idx]
        if line.kind == LineKind.CONTEXT:
            result.append(
                _row(line.text, ColumnKind.CONTEXT, line.text, ColumnKind.CONTEXT, width)
            )
        elif line.kind == LineKind.DELETED:
            nxt = lines[idx + 1] if idx + 1 < total else None
            if nxt is not None and nxt.kind == LineKind.ADDED:
                result.append(
                    _row(line.text, ColumnKind.DELETED, nxt.text, ColumnKind.ADDED, width)
                )
                idx += 1
            else:
                result.append(_row(line.text, ColumnKind.DELETED, "", ColumnKind.EMPTY, width))
        elif line.kind == LineKind.ADDED:
            result.append(_row("", ColumnKind.EMPTY, line.text, ColumnKind.ADDED, width))
        else:
            result.append(line)
        idx += 1
    return result
