"""Rich terminal presenter — paints a MemorySurface onto a Console."""

from __future__ import annotations

from typing import Dict, Optional

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from diffpane.host.memory import MemorySurface

_TAG_STYLE: Dict[str, str] = {
    "ins": "on dark_green",
    "del": "on dark_red",
    "changed": "bold on grey23",
    "muted": "dim italic",
}

_LEVEL_STYLE = {
    "warn": "[yellow]⚠[/yellow] ",
    "error": "[bold red]Error:[/bold red] ",
}


class TerminalPresenter:
    """Print surface lines with their style spans and full-width bands."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def line_text(self, surface: MemorySurface, index: int) -> Text:
        content = surface.get_line(index)
        text = Text(content)
        for span in surface.styles:
            if span.line == index and span.tag in _TAG_STYLE:
                text.stylize(_TAG_STYLE[span.tag], span.start, span.end)
        for overlay in surface.overlays:
            if overlay.line != index or overlay.tag not in _TAG_STYLE:
                continue
            # Band from the end of the text to the right edge only
            fill = self.console.width - cell_len(content)
            if fill > 0:
                text.append(" " * min(fill, len(overlay.text)), style=_TAG_STYLE[overlay.tag])
        return text

    def show(self, surface: MemorySurface) -> None:
        for note in surface.notifications:
            prefix = _LEVEL_STYLE.get(note.level, "")
            self.console.print(f"{prefix}{note.message}", highlight=False)

        wrap = bool(surface.options.get("wrap", False))
        for index in range(len(surface.lines)):
            self.console.print(
                self.line_text(surface, index),
                no_wrap=not wrap,
                overflow="fold" if wrap else "crop",
                highlight=False,
            )
