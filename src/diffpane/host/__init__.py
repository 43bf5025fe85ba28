"""Host adapters — surfaces and schedulers for running the renderer outside an editor."""

from diffpane.host.aio import AsyncioScheduler
from diffpane.host.memory import ManualScheduler, MemorySurface, Notification, Overlay, StyleSpan
from diffpane.host.terminal import TerminalPresenter

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "MemorySurface",
    "Notification",
    "Overlay",
    "StyleSpan",
    "TerminalPresenter",
]
