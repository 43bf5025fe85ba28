"""Render pipeline — parse, format, lay out, and style a diff on a surface.

Styling is size-tiered so large diffs never block the host loop:

* up to ``instant_ceiling`` lines: styled before ``render_diff`` returns
* up to ``deferred_ceiling`` lines: one pass, ``defer_delay_ms`` later
* above that: ``chunk_size`` lines per step, ``chunk_delay_ms`` apart
* above ``total_ceiling``: truncated first, with a warning

Every deferred step re-checks that the surface is still valid and still
holds the content it was scheduled for; otherwise the step does nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from diffpane.config.schema import DEFAULT_BUDGET, HighlightStyle, RenderBudget, RenderConfig
from diffpane.diff.models import ClassifiedLine
from diffpane.diff.parser import parse_diff
from diffpane.render.formatting import file_header_block, filter_no_newline, format_headers
from diffpane.render.layout import to_side_by_side
from diffpane.render.styles import apply_styles
from diffpane.render.surface import DisplaySurface, Scheduler, Window

logger = logging.getLogger(__name__)

CONTENT_TYPE = "diff"


@dataclass
class RenderJob:
    """Styling progress for one render: the lines and the next index to style."""

    surface: DisplaySurface
    lines: List[ClassifiedLine]
    highlight_style: HighlightStyle
    window: Optional[Window]
    revision: int
    chunk_size: int
    next_index: int = 0

    @property
    def done(self) -> bool:
        return self.next_index >= len(self.lines)

    def live(self) -> bool:
        """True while the surface is valid and still shows this job's content."""
        if not self.surface.is_valid():
            logger.debug("Surface invalidated; styling stopped at line %d", self.next_index)
            return False
        if self.surface.revision() != self.revision:
            logger.debug("Surface content replaced; styling stopped at line %d", self.next_index)
            return False
        return True

    def run_all(self) -> None:
        if not self.live():
            return
        apply_styles(
            self.surface, self.lines, self.next_index, len(self.lines),
            self.highlight_style, self.window,
        )
        self.next_index = len(self.lines)

    def step(self) -> bool:
        """Style the next chunk. Returns True if more chunks remain."""
        if not self.live():
            return False
        end = min(self.next_index + self.chunk_size, len(self.lines))
        apply_styles(
            self.surface, self.lines, self.next_index, end,
            self.highlight_style, self.window,
        )
        self.next_index = end
        return not self.done

    def run_chunks(self, scheduler: Scheduler, delay_ms: int) -> None:
        if self.step():
            scheduler.call_later(delay_ms, lambda: self.run_chunks(scheduler, delay_ms))


def prepare_lines(
    diff_text: str,
    config: RenderConfig,
    label: Optional[str] = None,
    source_tag: Optional[str] = None,
    window: Optional[Window] = None,
) -> List[ClassifiedLine]:
    """Run parse → header format → marker filter → file header → layout."""
    lines, stats = parse_diff(diff_text)
    lines = format_headers(lines, stats, config.header_style)
    lines = filter_no_newline(lines, config.show_no_newline)

    if label:
        lines = file_header_block(label, source_tag) + lines

    if config.layout == "side_by_side":
        if window is not None and window.has_width:
            lines = to_side_by_side(lines, window.width)
        else:
            logger.debug("No window width; rendering side-by-side diff inline")
    return lines


def render_diff(
    surface: DisplaySurface,
    diff_text: str,
    label: Optional[str] = None,
    source_tag: Optional[str] = None,
    *,
    config: Optional[RenderConfig] = None,
    scheduler: Optional[Scheduler] = None,
    budget: RenderBudget = DEFAULT_BUDGET,
    window: Optional[Window] = None,
) -> None:
    """Render *diff_text* into *surface* with size-tiered styling.

    Without a *scheduler* every tier styles synchronously.
    """
    config = config or RenderConfig()
    lines = prepare_lines(diff_text, config, label, source_tag, window)

    line_count = len(lines)
    if line_count > budget.total_ceiling:
        message = (
            f"Large diff ({line_count} lines). "
            f"Showing first {budget.total_ceiling} lines."
        )
        logger.warning(message)
        surface.notify(message, "warn")
        lines = lines[: budget.total_ceiling]
        line_count = len(lines)

    surface.reset()
    surface.set_lines([line.text for line in lines])

    job = RenderJob(
        surface=surface,
        lines=lines,
        highlight_style=config.highlight_style,
        window=window,
        revision=surface.revision(),
        chunk_size=budget.chunk_size,
    )

    if line_count <= budget.instant_ceiling or scheduler is None:
        logger.debug("Styling %d lines immediately", line_count)
        job.run_all()
    elif line_count <= budget.deferred_ceiling:
        logger.debug("Deferring styling of %d lines by %dms", line_count, budget.defer_delay_ms)
        scheduler.call_later(budget.defer_delay_ms, job.run_all)
    else:
        logger.debug("Styling %d lines in chunks of %d", line_count, budget.chunk_size)
        job.run_chunks(scheduler, budget.chunk_delay_ms)

    if surface.is_valid():
        surface.configure(wrap=config.wrap, readonly=True, content_type=CONTENT_TYPE)
