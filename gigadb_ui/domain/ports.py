from __future__ import annotations
from typing import Any, Callable, Protocol, TypeVar

from .entities import MutationOutcome, Page, UserDetail

UserId = str
T = TypeVar("T")


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class UserPort(Protocol):
    """Read/create/delete operations against the GigaDB REST service."""

    def get_user(self, user_id: UserId) -> UserDetail: ...
    def get_page(self, index: int) -> Page: ...
    def create_user(self, name: str, email: str) -> MutationOutcome: ...
    def delete_user(self, user_id: UserId) -> None: ...


# ---- UI runtime capabilities ----
ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]
NotifyFn = Callable[[str], None]
NavigateFn = Callable[[str], None]
ConfirmFn = Callable[[str], bool]


class TaskRunner(Protocol):
    """Runs blocking work off the event loop and reports back on the loop."""

    def submit(
        self,
        work: Callable[[], T],
        on_done: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None: ...
