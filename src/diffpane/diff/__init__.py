"""Diff layer — line classification models and the unified diff parser."""

from diffpane.diff.models import ClassifiedLine, ColumnKind, DiffStats, HunkInfo, LineKind
from diffpane.diff.parser import DiffParser, get_diff_stats, parse_diff, parse_hunk_header

__all__ = [
    "ClassifiedLine",
    "ColumnKind",
    "DiffParser",
    "DiffStats",
    "HunkInfo",
    "LineKind",
    "get_diff_stats",
    "parse_diff",
    "parse_hunk_header",
]
