"""asyncio host scheduler — delayed callbacks on the running event loop."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional


class AsyncioScheduler:
    """Schedule single-shot callbacks with ``loop.call_later``.

    All callbacks run on the loop thread, one at a time.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._pending = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def pending(self) -> int:
        return self._pending

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._pending += 1
        self._idle.clear()
        self._loop.call_later(delay_ms / 1000, self._run, callback)

    def _run(self, callback: Callable[[], None]) -> None:
        try:
            callback()
        finally:
            self._pending -= 1
            if self._pending == 0:
                self._idle.set()

    async def drain(self) -> None:
        """Wait until every scheduled callback, including chained ones, has run."""
        while self._pending:
            await self._idle.wait()
