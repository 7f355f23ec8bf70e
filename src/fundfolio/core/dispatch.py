"""Deferred dispatch onto the application's main context.

Some mutations (adding a reminder) are not applied in the caller's frame;
they are handed to a dispatcher and land on the main context's next
cycle. Two dispatchers are provided:

- :class:`MainQueue`: an explicit FIFO drained by ``run_pending()``,
  for synchronous hosts such as the CLI and tests.
- :class:`AsyncioDispatcher`: schedules onto an asyncio event loop with
  ``call_soon_threadsafe``. Worker threads may dispatch once the loop is
  bound, either passed in or captured when built inside a running loop.
"""

from __future__ import annotations

import asyncio
import threading
from collections import deque
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from loguru import logger

Callback = Callable[[], None]


@runtime_checkable
class Dispatcher(Protocol):
    """Anything that can run a callback on the main context later."""

    def dispatch(self, callback: Callback) -> None: ...


class MainQueue:
    """FIFO of pending callbacks, drained explicitly by the host."""

    def __init__(self) -> None:
        self._pending: deque[Callback] = deque()
        self._lock = threading.Lock()

    def dispatch(self, callback: Callback) -> None:
        with self._lock:
            self._pending.append(callback)

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def run_pending(self) -> int:
        """Run every callback queued before this call. Returns how many ran.

        Callbacks dispatched while draining wait for the next drain.
        """
        with self._lock:
            batch = list(self._pending)
            self._pending.clear()

        for callback in batch:
            try:
                callback()
            except Exception as exc:
                logger.warning(f"Deferred callback {callback!r} failed: {exc}")
        return len(batch)


class AsyncioDispatcher:
    """Dispatch onto an asyncio event loop's next iteration.

    Without an explicit *loop*, the loop running at construction is used.
    Built outside any loop, the first dispatch must come from the loop
    thread so the running loop can be bound then.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError:
                raise RuntimeError(
                    "AsyncioDispatcher has no event loop; pass loop= or create it inside the running loop"
                ) from None
        return self._loop

    def dispatch(self, callback: Callback) -> None:
        self.loop.call_soon_threadsafe(callback)
