"""Short-lived UI confirmations that switch themselves off."""

from __future__ import annotations

import time
from typing import Callable, Optional

from gigadb_ui.app.scheduler import TimerScheduler
from gigadb_ui.domain.ports import CancelFn, ScheduleFn

DEFAULT_FEEDBACK_MS = 2000


class FeedbackTimer:
    """One-shot signal that switches itself off after a fixed delay.

    Used for short confirmations such as "Copied!". Re-triggering restarts the
    delay instead of stacking expirations.
    """

    def __init__(
        self,
        schedule: ScheduleFn,
        cancel: CancelFn,
        *,
        duration_ms: int = DEFAULT_FEEDBACK_MS,
        on_change: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._scheduler = TimerScheduler(schedule, cancel)
        self.duration_ms = int(duration_ms)
        self.on_change = on_change
        self._clock = clock
        self.active = False
        self.expires_at: Optional[float] = None

    def trigger(self) -> None:
        self.active = True
        self.expires_at = self._clock() + self.duration_ms / 1000.0
        self._scheduler.schedule("expire", self.duration_ms, self._expire)
        self._changed()

    def clear(self) -> None:
        """Switch the signal off now and drop the pending expiry."""
        self._scheduler.cancel_all()
        if self.active:
            self._expire()

    def dispose(self) -> None:
        """Cancel the pending expiry; the signal keeps its current value."""
        self._scheduler.cancel_all()

    def _expire(self) -> None:
        self.active = False
        self.expires_at = None
        self._changed()

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()


__all__ = ["DEFAULT_FEEDBACK_MS", "FeedbackTimer"]
