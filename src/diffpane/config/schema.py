"""Configuration schema — frozen dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal

HeaderStyle = Literal["verbatim", "summary", "suppressed"]
HighlightStyle = Literal["full", "text"]
DiffLayout = Literal["inline", "side_by_side"]
DiffAlgorithm = Literal["myers", "minimal", "patience", "histogram"]

HEADER_STYLES = ("verbatim", "summary", "suppressed")
HIGHLIGHT_STYLES = ("full", "text")
DIFF_LAYOUTS = ("inline", "side_by_side")
DIFF_ALGORITHMS = ("myers", "minimal", "patience", "histogram")

# Values accepted from older configs
HEADER_STYLE_ALIASES: Dict[str, str] = {
    "raw": "verbatim",
    "text": "summary",
    "none": "suppressed",
}


@dataclass(frozen=True)
class RenderConfig:
    header_style: HeaderStyle = "summary"
    highlight_style: HighlightStyle = "full"  # extend highlights to the window edge
    wrap: bool = False
    show_no_newline: bool = True
    layout: DiffLayout = "inline"


@dataclass(frozen=True)
class RenderBudget:
    """Line-count thresholds that pick a rendering tier."""

    instant_ceiling: int = 500
    deferred_ceiling: int = 2000
    total_ceiling: int = 5000  # truncate and warn above this
    defer_delay_ms: int = 50
    chunk_size: int = 200
    chunk_delay_ms: int = 10


@dataclass(frozen=True)
class DiffOptions:
    algorithm: DiffAlgorithm = "histogram"
    context_lines: int = 3


@dataclass(frozen=True)
class DiffPaneConfig:
    version: str = "1.0"
    preview: RenderConfig = field(default_factory=RenderConfig)
    budget: RenderBudget = field(default_factory=RenderBudget)
    diff: DiffOptions = field(default_factory=DiffOptions)


DEFAULT_BUDGET = RenderBudget()
