"""In-memory host adapters — a recording surface and a virtual-clock scheduler."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple


@dataclass(frozen=True)
class StyleSpan:
    line: int
    start: int
    end: int
    tag: str


@dataclass(frozen=True)
class Overlay:
    line: int
    col: int
    text: str
    tag: str


@dataclass(frozen=True)
class Notification:
    message: str
    level: str


@dataclass(eq=False)
class MemorySurface:
    """A DisplaySurface that records everything done to it."""

    lines: List[str] = field(default_factory=list)
    styles: List[StyleSpan] = field(default_factory=list)
    overlays: List[Overlay] = field(default_factory=list)
    notifications: List[Notification] = field(default_factory=list)
    options: Dict[str, object] = field(default_factory=dict)
    valid: bool = True
    reset_count: int = 0
    _revision: int = 0

    def reset(self) -> None:
        self.reset_count += 1
        self.lines = []
        self.options = {}
        self.clear_styles()

    def set_lines(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self._revision += 1

    def notify(self, message: str, level: str) -> None:
        self.notifications.append(Notification(message, level))

    def is_valid(self) -> bool:
        return self.valid

    def revision(self) -> int:
        return self._revision

    def get_line(self, index: int) -> str:
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return ""

    def clear_styles(self) -> None:
        self.styles = []
        self.overlays = []

    def add_style(self, line: int, start: int, end: int, tag: str) -> None:
        self.styles.append(StyleSpan(line, start, end, tag))

    def add_overlay(self, line: int, col: int, text: str, tag: str) -> None:
        self.overlays.append(Overlay(line, col, text, tag))

    def configure(self, *, wrap: bool, readonly: bool, content_type: str) -> None:
        self.options = {"wrap": wrap, "readonly": readonly, "content_type": content_type}

    def styled_lines(self) -> set[int]:
        return {span.line for span in self.styles}


class ManualScheduler:
    """Scheduler driven by a virtual clock, for tests and batch tools.

    Nothing runs until :meth:`advance` or :meth:`run_all` is called.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: List[Tuple[int, int, Callable[[], None]]] = []
        self._seq = itertools.count()
        self.delays: List[int] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.delays.append(delay_ms)
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._seq), callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def advance(self, ms: int) -> int:
        """Move the clock forward *ms*, running everything that falls due.

        Returns the number of callbacks run.
        """
        target = self.now_ms + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self.now_ms = due
            callback()
            ran += 1
        self.now_ms = target
        return ran

    def run_all(self) -> int:
        """Run callbacks until the queue is empty. Returns how many ran."""
        ran = 0
        while self._queue:
            due, _, callback = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, due)
            callback()
            ran += 1
        return ran
