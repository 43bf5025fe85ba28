"""Header formatting, no-newline marker filtering, and the file header block.

Each function returns a new list; inputs are never mutated.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import List, Optional, Sequence

from diffpane.config.schema import HeaderStyle
from diffpane.diff.models import ClassifiedLine, DiffStats, LineKind

_HEADER_KINDS = (LineKind.DIFF_HEADER, LineKind.HUNK_HEADER)

_FILE_ICON = "📄"
_EXTENSION_ICON = {
    ".py": "🐍",
    ".md": "📝",
    ".txt": "📝",
    ".json": "📋",
    ".toml": "⚙️",
    ".yaml": "⚙️",
    ".yml": "⚙️",
    ".lua": "🌙",
    ".sh": "🐚",
}


def summary_text(stats: DiffStats) -> Optional[str]:
    """Return ``"Changes: +A, -D, ~H hunks"`` with zero segments left out."""
    parts: List[str] = []
    if stats.added > 0:
        parts.append(f"+{stats.added}")
    if stats.deleted > 0:
        parts.append(f"-{stats.deleted}")
    if stats.hunks > 0:
        parts.append(f"~{stats.hunks} hunks")
    if not parts:
        return None
    return "Changes: " + ", ".join(parts)


def format_headers(
    lines: Sequence[ClassifiedLine],
    stats: DiffStats,
    style: HeaderStyle,
) -> List[ClassifiedLine]:
    """Rewrite header lines according to *style*.

    ``summary`` drops patch metadata and puts a single diff-wide summary
    where the last hunk header was; earlier hunk headers are dropped.
    """
    if style == "verbatim":
        return list(lines)

    if style == "suppressed":
        return [line for line in lines if line.kind not in _HEADER_KINDS]

    result: List[ClassifiedLine] = []
    last_hunk: Optional[int] = None
    for line in lines:
        if line.kind == LineKind.DIFF_HEADER:
            continue
        if line.kind == LineKind.HUNK_HEADER:
            last_hunk = len(result)
            continue
        result.append(line)

    text = summary_text(stats)
    if last_hunk is not None and text is not None:
        result.insert(last_hunk, ClassifiedLine(LineKind.HUNK_HEADER, text))
    return result


def filter_no_newline(lines: Sequence[ClassifiedLine], show: bool) -> List[ClassifiedLine]:
    """Drop "\\ No newline at end of file" markers unless *show*."""
    if show:
        return list(lines)
    return [line for line in lines if line.kind != LineKind.NO_NEWLINE]


def file_icon(label: str) -> str:
    return _EXTENSION_ICON.get(PurePath(label).suffix.lower(), _FILE_ICON)


def file_header_block(label: str, source_tag: Optional[str] = None) -> List[ClassifiedLine]:
    """Three FILE_HEADER lines: spacer, icon + label, spacer."""
    title = f"  {file_icon(label)}  {label}"
    if source_tag:
        title += f"  [{source_tag}]"
    return [
        ClassifiedLine(LineKind.FILE_HEADER, ""),
        ClassifiedLine(LineKind.FILE_HEADER, title),
        ClassifiedLine(LineKind.FILE_HEADER, ""),
    ]
