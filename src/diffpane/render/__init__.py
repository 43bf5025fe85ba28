"""Rendering — header formatting, side-by-side layout, styling, scheduling."""

from diffpane.render.formatting import file_header_block, filter_no_newline, format_headers
from diffpane.render.layout import to_side_by_side
from diffpane.render.pipeline import RenderJob, prepare_lines, render_diff
from diffpane.render.styles import apply_styles, highlight_diff, style_for
from diffpane.render.surface import DisplaySurface, Scheduler, Window

__all__ = [
    "DisplaySurface",
    "RenderJob",
    "Scheduler",
    "Window",
    "apply_styles",
    "file_header_block",
    "filter_no_newline",
    "format_headers",
    "highlight_diff",
    "prepare_lines",
    "render_diff",
    "style_for",
    "to_side_by_side",
]
