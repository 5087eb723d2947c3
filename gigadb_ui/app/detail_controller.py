"""Single-user profile controller.

Loads one user by id and runs the confirm-then-delete flow. A successful
delete hands control back to the list root through the injected ``navigate``
capability.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from gigadb_ui.app.feedback_timer import DEFAULT_FEEDBACK_MS, FeedbackTimer
from gigadb_ui.domain.entities import Failure, Idle, Pending, RequestState, Success, UserDetail
from gigadb_ui.domain.ports import (
    CancelFn,
    ConfirmFn,
    NavigateFn,
    NotifyFn,
    ScheduleFn,
    TaskRunner,
    UseCaseError,
    UserId,
)
from gigadb_ui.usecases.error_mapping import CONFIG_MISSING, map_api_error

LIST_ROOT = "/"


class DetailController:
    """Own the detail-view state for one user id at a time."""

    def __init__(
        self,
        *,
        fetch_user: Optional[Callable[[UserId], UserDetail]],
        delete_user: Optional[Callable[[UserId], None]],
        schedule: ScheduleFn,
        cancel: CancelFn,
        runner: TaskRunner,
        navigate: NavigateFn,
        notify: NotifyFn,
        confirm: ConfirmFn,
        clipboard: Optional[Callable[[str], None]] = None,
        feedback_ms: int = DEFAULT_FEEDBACK_MS,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        """Initialize detail state.

        Args:
            fetch_user: Lookup use case, or ``None`` when not configured.
            delete_user: Delete use case, or ``None`` when not configured.
            schedule: ``after(delay_ms, callback)`` compatible timer function.
            cancel: ``after_cancel(token)`` compatible cancel function.
            runner: Executes blocking requests and reports back on the loop.
            navigate: Route change capability (``navigate("/")``).
            notify: Synchronous user-visible notice for failed actions.
            confirm: Blocking yes/no prompt used before deletion.
            clipboard: Writes text to the clipboard for ``copy_id``.
            feedback_ms: Lifetime of the "Copied!" signal.
            on_change: Called after every visible state change.
        """
        self._log = logging.getLogger(__name__)
        self._fetch_user = fetch_user
        self._delete_user = delete_user
        self._runner = runner
        self._navigate = navigate
        self._notify = notify
        self._confirm = confirm
        self._clipboard = clipboard
        self.on_change = on_change

        self.user_id: Optional[UserId] = None
        self.state: RequestState = Idle()
        self.deleting = False
        self.copied = FeedbackTimer(
            schedule, cancel, duration_ms=feedback_ms, on_change=self._changed
        )
        self._generation = 0
        self._suspended = False
        self._disposed = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def loading(self) -> bool:
        return isinstance(self.state, Pending)

    @property
    def not_found(self) -> bool:
        """Any failed lookup renders the dedicated not-found view."""
        return isinstance(self.state, Failure)

    @property
    def detail(self) -> Optional[UserDetail]:
        return self.state.payload if isinstance(self.state, Success) else None

    @property
    def can_remove(self) -> bool:
        return self.detail is not None and not self.deleting

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def load(self, user_id: UserId) -> None:
        """Fetch ``user_id``; called on mount and whenever the id changes."""
        if self._disposed:
            return
        self._generation += 1
        generation = self._generation
        self.user_id = str(user_id)
        self.deleting = False
        self.state = Pending()
        self._changed()

        fetch = self._fetch_user
        if fetch is None:
            self._on_load_failed(
                generation, UseCaseError(CONFIG_MISSING, "API URL is not configured.")
            )
            return
        target = self.user_id
        self._runner.submit(
            lambda: fetch(target),
            lambda detail: self._on_loaded(generation, detail),
            lambda exc: self._on_load_failed(generation, exc),
        )

    def remove(self, confirm: Optional[ConfirmFn] = None) -> bool:
        """Ask for confirmation, then delete the loaded user.

        Args:
            confirm: Optional prompt overriding the constructor default for
                this call (used by views whose dialogs are asynchronous).

        Returns:
            ``True`` when a delete request was dispatched.
        """
        detail = self.detail
        if detail is None:
            self._log.warning("Delete ignored: no user loaded (state=%s)", self.state)
            return False
        if self.deleting:
            self._log.debug("Delete ignored: already deleting %s", detail.user.id)
            return False
        ask = confirm or self._confirm
        user = detail.user
        if not ask(f"Delete user '{user.name}' ({user.id})? This cannot be undone."):
            return False
        delete = self._delete_user
        if delete is None:
            self._notify("API URL is not configured.")
            return False

        generation = self._generation
        self.deleting = True
        self._changed()
        self._runner.submit(
            lambda: delete(user.id),
            lambda _: self._on_deleted(generation, user.id),
            lambda exc: self._on_delete_failed(generation, exc),
        )
        return True

    def copy_id(self) -> None:
        """Copy the loaded user's id and raise the "Copied!" signal."""
        detail = self.detail
        if self._disposed or detail is None:
            return
        if self._clipboard:
            self._clipboard(detail.user.id)
        self.copied.trigger()

    def suspend(self) -> None:
        """Pause while the view is disconnected; ``resume`` reloads the user."""
        if self._disposed:
            return
        self._suspended = True
        self._generation += 1
        self.deleting = False
        self.copied.clear()

    def resume(self) -> None:
        """Reload the current user after a ``suspend``; no-op otherwise."""
        if self._disposed or not self._suspended:
            return
        self._suspended = False
        if self.user_id is not None:
            self.load(self.user_id)

    def dispose(self) -> None:
        self._disposed = True
        self._generation += 1
        self.copied.dispose()

    # ------------------------------------------------------------------
    # Completion handlers
    # ------------------------------------------------------------------
    def _on_loaded(self, generation: int, detail: UserDetail) -> None:
        if generation != self._generation:
            self._log.debug("Discarding stale user %s", detail.user.id)
            return
        self.state = Success(detail)
        self._changed()

    def _on_load_failed(self, generation: int, exc: Exception) -> None:
        if generation != self._generation:
            return
        err = map_api_error(exc, rejection_is_not_found=True)
        self._log.warning("Failed to load user %s: %s", self.user_id, err.message)
        self.state = Failure(err.code, err.message)
        self._changed()

    def _on_deleted(self, generation: int, user_id: UserId) -> None:
        self._log.info("Deleted user %s", user_id)
        if self._disposed or generation != self._generation:
            return
        self.deleting = False
        self._navigate(LIST_ROOT)

    def _on_delete_failed(self, generation: int, exc: Exception) -> None:
        err = map_api_error(exc)
        self._log.warning("Delete failed: %s", err.message)
        if self._disposed:
            return
        if generation == self._generation:
            self.deleting = False
            self._changed()
        self._notify(err.message)

    def _changed(self) -> None:
        if self.on_change and not self._disposed:
            self.on_change()


__all__ = ["DetailController", "LIST_ROOT"]
