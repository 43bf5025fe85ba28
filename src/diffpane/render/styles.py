"""Style applier — maps classified lines to style tags on a display surface."""

from __future__ import annotations

from typing import Optional, Sequence

from diffpane.config.schema import HighlightStyle
from diffpane.diff.models import ClassifiedLine, ColumnKind, LineKind
from diffpane.render.layout import SEPARATOR_WIDTH
from diffpane.render.surface import DisplaySurface, Window

_LINE_TAG = {
    LineKind.ADDED: "ins",
    LineKind.DELETED: "del",
    LineKind.DIFF_HEADER: "changed",
    LineKind.HUNK_HEADER: "changed",
    LineKind.NO_NEWLINE: "muted",
    LineKind.FILE_HEADER: "changed",
}

_COLUMN_TAG = {
    ColumnKind.ADDED: "ins",
    ColumnKind.DELETED: "del",
}

# Wider than any window we expect to draw into
OVERLAY_PAD = 1000


def style_for(kind: LineKind) -> Optional[str]:
    """Return the style tag for *kind*; context lines have none."""
    return _LINE_TAG.get(kind)


def column_style_for(kind: Optional[ColumnKind]) -> Optional[str]:
    return _COLUMN_TAG.get(kind) if kind is not None else None


def _extend(surface: DisplaySurface, idx: int, col: int, tag: str, window: Optional[Window]) -> None:
    pad = OVERLAY_PAD
    if window is not None and window.has_width:
        pad = max(pad, window.width)
    surface.add_overlay(idx, col, " " * pad, tag)


def _style_row(
    surface: DisplaySurface,
    idx: int,
    line: ClassifiedLine,
    full_width: bool,
    window: Optional[Window],
) -> None:
    text = surface.get_line(idx)
    split = line.separator_offset or 0
    left_tag = column_style_for(line.left_kind)
    right_tag = column_style_for(line.right_kind)
    if left_tag:
        surface.add_style(idx, 0, split, left_tag)
    if right_tag:
        surface.add_style(idx, split + SEPARATOR_WIDTH, len(text), right_tag)
        if full_width:
            _extend(surface, idx, len(text), right_tag, window)


def apply_styles(
    surface: DisplaySurface,
    lines: Sequence[ClassifiedLine],
    start: int,
    stop: int,
    highlight_style: HighlightStyle,
    window: Optional[Window] = None,
) -> None:
    """Style ``lines[start:stop]``; list positions are surface line numbers."""
    full_width = highlight_style == "full"
    for idx in range(start, min(stop, len(lines))):
        line = lines[idx]
        if line.kind == LineKind.SIDE_BY_SIDE:
            _style_row(surface, idx, line, full_width, window)
            continue
        tag = style_for(line.kind)
        if tag is None:
            continue
        text = surface.get_line(idx)
        surface.add_style(idx, 0, len(text), tag)
        if full_width:
            _extend(surface, idx, len(text), tag, window)


def highlight_diff(
    surface: DisplaySurface,
    lines: Sequence[ClassifiedLine],
    window: Optional[Window] = None,
    *,
    highlight_style: HighlightStyle = "full",
) -> None:
    """Clear previous styles and style every line of *surface*."""
    if not surface.is_valid():
        return
    surface.clear_styles()
    apply_styles(surface, lines, 0, len(lines), highlight_style, window)
