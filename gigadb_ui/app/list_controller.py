"""Paginated user-list controller.

Keeps the displayed page consistent with the page index the user picks while
limiting network traffic: index changes are debounced, and every request
carries a generation number so responses for superseded requests are dropped
instead of overwriting newer state.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from gigadb_ui.app.scheduler import TimerScheduler
from gigadb_ui.domain.entities import Failure, Idle, Page, Pending, RequestState, Success
from gigadb_ui.domain.ports import CancelFn, ScheduleFn, TaskRunner, UseCaseError
from gigadb_ui.usecases.error_mapping import CONFIG_MISSING, map_api_error

DEFAULT_DEBOUNCE_MS = 500

_FETCH_TIMER = "fetch"


class ListSyncController:
    """Own the paginated list state for the home view."""

    def __init__(
        self,
        *,
        fetch_page: Optional[Callable[[int], Page]],
        schedule: ScheduleFn,
        cancel: CancelFn,
        runner: TaskRunner,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        on_change: Optional[Callable[[], None]] = None,
        initial_index: int = 1,
    ) -> None:
        """Initialize list state.

        Args:
            fetch_page: Page use case, or ``None`` when the service URL is not
                configured.
            schedule: ``after(delay_ms, callback)`` compatible timer function.
            cancel: ``after_cancel(token)`` compatible cancel function.
            runner: Executes blocking fetches and reports back on the loop.
            debounce_ms: Quiet period after the last index change.
            on_change: Called after every visible state change.
            initial_index: Page shown on mount.
        """
        self._log = logging.getLogger(__name__)
        self._fetch_page = fetch_page
        self._scheduler = TimerScheduler(schedule, cancel)
        self._runner = runner
        self.debounce_ms = int(debounce_ms)
        self.on_change = on_change

        self.page_index: int = _validate_index(initial_index)
        self.state: RequestState = Idle()
        self.page: Optional[Page] = None
        self._generation = 0
        self._suspended = False
        self._disposed = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def generation(self) -> int:
        return self._generation

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Pending)

    @property
    def failure(self) -> Optional[Failure]:
        return self.state if isinstance(self.state, Failure) else None

    @property
    def is_empty(self) -> bool:
        """True when the current index loaded successfully with no users."""
        return isinstance(self.state, Success) and self.state.payload.is_empty

    @property
    def can_go_previous(self) -> bool:
        return self.page_index > 1

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def mount(self) -> None:
        """Start the first (debounced) fetch for the current index."""
        self._schedule_fetch()

    def set_page_index(self, index: int) -> None:
        """Switch to ``index`` and fetch it once the debounce window closes.

        Raises:
            ValueError: If ``index`` is not a positive integer.
        """
        index = _validate_index(index)
        if self._disposed or index == self.page_index:
            return
        self.page_index = index
        self._schedule_fetch()

    def next_page(self) -> None:
        # No total count is available, so "next" is always allowed.
        self.set_page_index(self.page_index + 1)

    def previous_page(self) -> None:
        self.set_page_index(max(self.page_index - 1, 1))

    def refresh(self) -> None:
        """Re-fetch the current index immediately, keeping the index."""
        if self._disposed:
            return
        self._scheduler.cancel(_FETCH_TIMER)
        generation = self._begin()
        self._issue(generation)

    def suspend(self) -> None:
        """Pause while the view is disconnected; ``resume`` re-fetches."""
        if self._disposed:
            return
        self._suspended = True
        self._generation += 1
        self._scheduler.cancel_all()

    def resume(self) -> None:
        """Re-fetch the current index after a ``suspend``; no-op otherwise."""
        if self._disposed or not self._suspended:
            return
        self._suspended = False
        self.refresh()

    def dispose(self) -> None:
        """Cancel pending timers and ignore any response still in flight."""
        self._disposed = True
        self._generation += 1
        self._scheduler.cancel_all()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _begin(self) -> int:
        self._generation += 1
        self.state = Pending()
        self._changed()
        return self._generation

    def _schedule_fetch(self) -> None:
        generation = self._begin()
        self._scheduler.schedule(
            _FETCH_TIMER, self.debounce_ms, lambda: self._issue(generation)
        )

    def _issue(self, generation: int) -> None:
        if generation != self._generation:
            return
        index = self.page_index
        fetch = self._fetch_page
        if fetch is None:
            self._fail(
                generation,
                index,
                UseCaseError(CONFIG_MISSING, "API URL is not configured."),
            )
            return
        self._log.debug("Fetching page %s (generation %s)", index, generation)
        self._runner.submit(
            lambda: fetch(index),
            lambda page: self._apply(generation, index, page),
            lambda exc: self._fail(generation, index, exc),
        )

    def _apply(self, generation: int, index: int, page: Page) -> None:
        if generation != self._generation:
            self._log.debug("Discarding stale page %s (generation %s)", index, generation)
            return
        self.page = page
        self.state = Success(page)
        self._changed()

    def _fail(self, generation: int, index: int, exc: Exception) -> None:
        if generation != self._generation:
            self._log.debug("Discarding stale failure for page %s: %s", index, exc)
            return
        err = map_api_error(exc)
        self._log.warning("Failed to load page %s: %s", index, err.message)
        # The last good page stays in self.page.
        self.state = Failure(err.code, err.message)
        self._changed()

    def _changed(self) -> None:
        if self.on_change and not self._disposed:
            self.on_change()


def _validate_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or index < 1:
        raise ValueError(f"Page index must be a positive integer, got {index!r}")
    return index


__all__ = ["DEFAULT_DEBOUNCE_MS", "ListSyncController"]
