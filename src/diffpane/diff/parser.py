"""Unified diff parser — classifies every line and counts changes.

Produces ClassifiedLine objects in input order, except for
"\\ No newline at end of file" markers, which are withheld and appended
after everything else in the order they were seen. Never raises: a
malformed hunk header is still a hunk header, just without HunkInfo.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from diffpane.diff.models import ClassifiedLine, DiffStats, HunkInfo, LineKind

logger = logging.getLogger(__name__)

# --- Regex patterns for diff parsing ---

_HUNK_HEADER_RE = re.compile(
    r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@"
)

NO_NEWLINE_MARKER = "\\ No newline at end of file"

# File-level patch metadata, not diff content
_METADATA_PREFIXES = ("diff ", "index ", "--- ", "+++ ")


def parse_hunk_header(header: str) -> Optional[HunkInfo]:
    """Return the ranges of *header*, or None if it is malformed.

    Omitted counts (``@@ -3 +5 @@``) default to 1.
    """
    m = _HUNK_HEADER_RE.match(header)
    if m is None:
        return None
    old_count = m.group(2)
    new_count = m.group(4)
    return HunkInfo(
        old_start=int(m.group(1)),
        old_count=int(old_count) if old_count is not None else 1,
        new_start=int(m.group(3)),
        new_count=int(new_count) if new_count is not None else 1,
    )


def _split_lines(diff_text: str) -> List[str]:
    """Split on LF only, dropping the empty tail of a trailing newline."""
    if not diff_text:
        return []
    lines = diff_text.split("\n")
    if lines[-1] == "":
        lines.pop()
    # CRLF → LF; content is otherwise untouched
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class DiffParser:
    """Parse unified diff text into classified lines plus stats.

    Usage::

        lines, stats = DiffParser(diff_text).parse()
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = _split_lines(diff_text)

    def parse(self) -> Tuple[List[ClassifiedLine], DiffStats]:
        result: List[ClassifiedLine] = []
        markers: List[ClassifiedLine] = []
        stats = DiffStats()

        for raw_line in self._lines:
            # --- "\ No newline at end of file" → relocated to the tail ---
            if raw_line.startswith(NO_NEWLINE_MARKER):
                markers.append(ClassifiedLine(LineKind.NO_NEWLINE, raw_line))
                continue

            # --- diff / index / --- / +++ metadata ---
            if raw_line.startswith(_METADATA_PREFIXES):
                result.append(ClassifiedLine(LineKind.DIFF_HEADER, raw_line))
                continue

            # --- Hunk header ---
            if raw_line.startswith("@@"):
                stats.hunks += 1
                info = parse_hunk_header(raw_line)
                if info is None:
                    logger.debug("Malformed hunk header: %r", raw_line)
                result.append(
                    ClassifiedLine(LineKind.HUNK_HEADER, raw_line, hunk_info=info)
                )
                continue

            # --- Content lines ---
            if raw_line.startswith("+"):
                stats.added += 1
                result.append(ClassifiedLine(LineKind.ADDED, raw_line[1:]))
            elif raw_line.startswith("-"):
                stats.deleted += 1
                result.append(ClassifiedLine(LineKind.DELETED, raw_line[1:]))
            else:
                text = raw_line[1:] if raw_line.startswith(" ") else raw_line
                result.append(ClassifiedLine(LineKind.CONTEXT, text))

        result.extend(markers)
        return result, stats


def parse_diff(diff_text: str) -> Tuple[List[ClassifiedLine], DiffStats]:
    """Classify every line of *diff_text*. Empty text gives ``([], DiffStats())``."""
    return DiffParser(diff_text).parse()


def get_diff_stats(diff_text: str) -> dict[str, int]:
    """Return ``{"added", "deleted", "changed"}`` where changed is the hunk count."""
    _, stats = parse_diff(diff_text)
    return stats.summary()
