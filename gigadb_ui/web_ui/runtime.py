"""NiceGUI runtime orchestration for the GigaDB browser.

One ``WebRuntime`` is shared by all browser sessions. It owns configuration
and the adapter wiring, and builds a fresh set of page controllers for each
page visit so no controller state leaks between tabs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from gigadb_ui.app.controller import AppController
from gigadb_ui.app.detail_controller import DetailController
from gigadb_ui.app.event_loop import AsyncioTaskRunner, AsyncioTimers
from gigadb_ui.app.form_controller import MutationFormController
from gigadb_ui.app.list_controller import ListSyncController
from gigadb_ui.app.settings import AppConfig
from gigadb_ui.domain.ports import ConfirmFn, NavigateFn, NotifyFn, TaskRunner


LOGGER = logging.getLogger(__name__)


@dataclass
class HomeSession:
    """Controllers hosted by the list page."""

    listing: ListSyncController
    form: MutationFormController

    def suspend(self) -> None:
        # The form has no timers; a create finishing meanwhile still refreshes.
        self.listing.suspend()

    def resume(self) -> None:
        self.listing.resume()

    def dispose(self) -> None:
        self.form.dispose()
        self.listing.dispose()


class WebRuntime:
    """Process-wide state used by NiceGUI pages."""

    def __init__(
        self,
        config: AppConfig,
        *,
        timers: Optional[AsyncioTimers] = None,
        runner: Optional[TaskRunner] = None,
    ) -> None:
        self.config = config
        self.controller = AppController(config)
        self._timers = timers
        self._runner = runner

    @property
    def ready(self) -> bool:
        return self.controller.ensure_ready()

    @property
    def status_message(self) -> str:
        if self.config.use_mock:
            return "Offline mock data"
        if self.ready:
            return str(self.config.api_base_url)
        return "API URL not configured"

    def _session_timers(self) -> AsyncioTimers:
        return self._timers or AsyncioTimers()

    def _session_runner(self) -> TaskRunner:
        return self._runner or AsyncioTaskRunner()

    def build_home(
        self,
        *,
        notify: NotifyFn,
        on_list_change: Optional[Callable[[], None]] = None,
        on_form_change: Optional[Callable[[], None]] = None,
    ) -> HomeSession:
        """Create the list + create-form controllers for one page visit."""
        ready = self.ready
        timers = self._session_timers()
        runner = self._session_runner()
        listing = ListSyncController(
            fetch_page=self.controller.uc_fetch_page if ready else None,
            schedule=timers.after,
            cancel=timers.after_cancel,
            runner=runner,
            debounce_ms=self.config.list_debounce_ms,
            on_change=on_list_change,
        )
        form = MutationFormController(
            create_user=self.controller.uc_create_user if ready else None,
            runner=runner,
            on_created=listing.refresh,
            notify=notify,
            on_change=on_form_change,
        )
        return HomeSession(listing=listing, form=form)

    def build_detail(
        self,
        *,
        navigate: NavigateFn,
        notify: NotifyFn,
        confirm: ConfirmFn,
        clipboard: Optional[Callable[[str], None]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> DetailController:
        """Create the profile controller for one page visit."""
        ready = self.ready
        timers = self._session_timers()
        return DetailController(
            fetch_user=self.controller.uc_fetch_user if ready else None,
            delete_user=self.controller.uc_delete_user if ready else None,
            schedule=timers.after,
            cancel=timers.after_cancel,
            runner=self._session_runner(),
            navigate=navigate,
            notify=notify,
            confirm=confirm,
            clipboard=clipboard,
            feedback_ms=self.config.feedback_ms,
            on_change=on_change,
        )


__all__ = ["HomeSession", "WebRuntime"]
