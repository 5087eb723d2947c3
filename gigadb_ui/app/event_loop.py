"""asyncio bindings for the controller runtime capabilities.

``AsyncioTimers`` exposes Tk-style ``after``/``after_cancel`` on top of
``loop.call_later``. ``AsyncioTaskRunner`` runs blocking ``requests`` calls in
the loop's default executor and delivers results back on the loop thread, so
controller state is only ever mutated from the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

_log = logging.getLogger(__name__)


class AsyncioTimers:
    """Tk ``after`` compatible timers backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def after(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._resolve_loop().call_later(max(0, int(delay_ms)) / 1000.0, callback)

    def after_cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class AsyncioTaskRunner:
    """Run blocking work off the loop; invoke callbacks on the loop thread.

    Dispatched work is never cancelled. Callers discard late results with their
    own generation counters.
    """

    def __init__(
        self,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._loop = loop
        self._executor = executor

    def submit(
        self,
        work: Callable[[], T],
        on_done: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        future = self._loop.run_in_executor(self._executor, work)

        def _finish(fut: "asyncio.Future[T]") -> None:
            if fut.cancelled():
                _log.debug("Background task cancelled before completion")
                return
            exc = fut.exception()
            if exc is None:
                on_done(fut.result())
            elif isinstance(exc, Exception):
                on_error(exc)
            else:
                raise exc

        future.add_done_callback(_finish)


__all__ = ["AsyncioTaskRunner", "AsyncioTimers"]
