"""diffpane — unified diff parsing, formatting and incremental preview rendering."""

from diffpane.config.loader import setup
from diffpane.diff.parser import get_diff_stats, parse_diff
from diffpane.render.pipeline import render_diff
from diffpane.render.styles import highlight_diff

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "get_diff_stats",
    "highlight_diff",
    "parse_diff",
    "render_diff",
    "setup",
]
