"""Scheduler helper that owns named UI timers for one controller.

Controllers pass ``after``/``after_cancel`` style callables into this class so
timer state is tracked in one place and can be cancelled safely when the
owning view is torn down.
"""

from __future__ import annotations


from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from gigadb_ui.domain.ports import CancelFn, ScheduleFn


@dataclass
class TimerHandle:
    """Timer token associated with a single timer channel.

    Attributes:
        key: Channel key (for example ``fetch`` or ``expire``).
        token: Token returned by the underlying scheduler implementation.
    """
    key: str
    token: Any


class TimerScheduler:
    """Manage per-channel one-shot timers using a UI scheduler."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[str, TimerHandle] = {}

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule or reschedule the timer for a channel.

        A pending timer on the same channel is cancelled first, so at most one
        callback per channel is ever outstanding.
        """
        delay = max(1, int(delay_ms))
        self.cancel(key)
        handle = TimerHandle(key=key, token=None)

        def _fire() -> None:
            if self._handles.get(key) is handle:
                del self._handles[key]
            callback()

        handle.token = self._schedule(delay, _fire)
        self._handles[key] = handle

    def cancel(self, key: str) -> None:
        """Cancel the pending timer for a channel, if any."""
        handle = self._handles.pop(key, None)
        if not handle:
            return
        self._cancel(handle.token)

    def cancel_all(self) -> None:
        """Cancel all pending timers across all channel keys."""
        for key in list(self._handles.keys()):
            self.cancel(key)

    def handle_for(self, key: str) -> Optional[TimerHandle]:
        """Return the current handle for a channel, if scheduled."""
        return self._handles.get(key)

    def is_scheduled(self, key: str) -> bool:
        return key in self._handles


__all__ = ["TimerHandle", "TimerScheduler"]
