"""Create-user dialog controller.

Drives the input, submitting and result phases of the "add user" surface and
reports each successful create through an injected callback.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from gigadb_ui.domain.entities import MutationOutcome
from gigadb_ui.domain.ports import NotifyFn, TaskRunner
from gigadb_ui.usecases.create_user import missing_fields
from gigadb_ui.usecases.error_mapping import map_api_error


class FormPhase(str, Enum):
    CLOSED = "closed"
    INPUT = "input"
    SUBMITTING = "submitting"
    RESULT_SHOWN = "result_shown"


class MutationFormController:
    """Two-phase "create user" dialog: input, then the created entity.

    The surface stays open after a successful create so the user can view the
    result, add another, or close. The list refresh is delegated to the
    ``on_created`` callback, so the form needs no knowledge of the list.
    """

    def __init__(
        self,
        *,
        create_user: Optional[Callable[[str, str], MutationOutcome]],
        runner: TaskRunner,
        on_created: Callable[[], None],
        notify: NotifyFn,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._create_user = create_user
        self._runner = runner
        self._on_created = on_created
        self._notify = notify
        self.on_change = on_change

        self.phase = FormPhase.CLOSED
        self.name = ""
        self.email = ""
        self.outcome: Optional[MutationOutcome] = None
        self.error: Optional[str] = None
        self._generation = 0
        self._disposed = False

    @property
    def is_open(self) -> bool:
        return self.phase is not FormPhase.CLOSED

    @property
    def missing(self) -> List[str]:
        return missing_fields(self.name, self.email)

    @property
    def can_submit(self) -> bool:
        return self.phase is FormPhase.INPUT and not self.missing

    def open(self) -> None:
        """Show the surface with empty fields; any previous result is dropped."""
        self._reset(FormPhase.INPUT)

    def close(self) -> None:
        self._reset(FormPhase.CLOSED)

    def set_name(self, value: str) -> None:
        self.name = str(value or "")
        self.error = None
        self._changed()

    def set_email(self, value: str) -> None:
        self.email = str(value or "")
        self.error = None
        self._changed()

    def submit(self) -> bool:
        """Send the create request.

        Returns:
            ``True`` when a request was dispatched. Blank fields and wrong
            phases return ``False`` without touching the network.
        """
        if self.phase is not FormPhase.INPUT:
            return False
        missing = self.missing
        if missing:
            self.error = f"Required field(s) missing: {', '.join(missing)}."
            self._changed()
            return False
        create = self._create_user
        if create is None:
            self.error = "API URL is not configured."
            self._notify(self.error)
            self._changed()
            return False

        name = self.name.strip()
        email = self.email.strip()
        self._generation += 1
        generation = self._generation
        self.phase = FormPhase.SUBMITTING
        self.error = None
        self._changed()
        self._runner.submit(
            lambda: create(name, email),
            lambda outcome: self._on_success(generation, outcome),
            lambda exc: self._on_failure(generation, exc),
        )
        return True

    def add_another(self) -> bool:
        """Return from the result view to an empty input form."""
        if self.phase is not FormPhase.RESULT_SHOWN:
            return False
        self._reset(FormPhase.INPUT)
        return True

    def dispose(self) -> None:
        self._disposed = True
        self._generation += 1

    # ------------------------------------------------------------------
    def _reset(self, phase: FormPhase) -> None:
        self._generation += 1
        self.phase = phase
        self.name = ""
        self.email = ""
        self.outcome = None
        self.error = None
        self._changed()

    def _on_success(self, generation: int, outcome: MutationOutcome) -> None:
        self._log.info("Created user %s", outcome.entity.id)
        # The entity exists even if the dialog was closed meanwhile.
        self._on_created()
        if self._disposed or generation != self._generation:
            return
        self.phase = FormPhase.RESULT_SHOWN
        self.outcome = outcome
        self._changed()

    def _on_failure(self, generation: int, exc: Exception) -> None:
        err = map_api_error(exc, default_message="Failed to create user")
        self._log.warning("Create failed: %s", err.message)
        if self._disposed:
            return
        if generation == self._generation:
            self.phase = FormPhase.INPUT
            self.error = err.message
            self._changed()
        self._notify(err.message)

    def _changed(self) -> None:
        if self.on_change and not self._disposed:
            self.on_change()


__all__ = ["FormPhase", "MutationFormController"]
