"""Host-facing interfaces the renderer drives.

A host (editor, terminal, test harness) implements these with adapters;
the renderer never touches host state beyond them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol


class DisplaySurface(Protocol):
    """A buffer-like target that holds lines and style annotations."""

    def reset(self) -> None:
        """Drop previous content and styles. Notifications already shown stay."""

    def set_lines(self, lines: List[str]) -> None:
        """Replace the whole content."""

    def notify(self, message: str, level: str) -> None:
        """Show a user-visible message (``"info"``, ``"warn"``, ``"error"``)."""

    def is_valid(self) -> bool:
        """False once the host has closed or wiped the surface."""

    def revision(self) -> int:
        """Counter bumped by every content replacement."""

    def get_line(self, index: int) -> str: ...

    def clear_styles(self) -> None: ...

    def add_style(self, line: int, start: int, end: int, tag: str) -> None:
        """Style the character range ``[start, end)`` of *line*."""

    def add_overlay(self, line: int, col: int, text: str, tag: str) -> None:
        """Draw *text* over the row from *col* without changing content."""

    def configure(self, *, wrap: bool, readonly: bool, content_type: str) -> None: ...


class Scheduler(Protocol):
    """Single-shot delayed task scheduler on the host's event loop."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


@dataclass(frozen=True)
class Window:
    """The pane showing a surface; *width* is in display cells when known."""

    width: Optional[int] = None

    @property
    def has_width(self) -> bool:
        return self.width is not None and self.width > 0
