from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..domain.entities import Page, Role, User
from .timing_vm import ServerTimingDisplay, ServerTimingView, format_ms

if TYPE_CHECKING:
    from ..app.list_controller import ListSyncController

LIST_STATUS_LOADING = "loading"
LIST_STATUS_EMPTY = "empty"
LIST_STATUS_ERROR = "error"
LIST_STATUS_READY = "ready"


@dataclass(frozen=True)
class UserRow:
    """One card in the user grid."""

    serial: int
    user_id: str
    name: str
    role: str
    is_admin: bool
    href: str


@dataclass(frozen=True)
class ListView:
    status: str
    rows: List[UserRow]
    page_index: int
    can_go_previous: bool
    timing: Optional[ServerTimingView]
    message: str = ""


def build_rows(page: Page, page_size: int) -> List[UserRow]:
    """Return grid rows with serial numbers continuing across pages."""
    offset = (page.index - 1) * max(1, int(page_size))
    return [_row(offset + position + 1, user) for position, user in enumerate(page.items)]


def _row(serial: int, user: User) -> UserRow:
    return UserRow(
        serial=serial,
        user_id=user.id,
        name=user.name,
        role=user.role.value,
        is_admin=user.role is Role.ADMIN,
        href=f"/{user.id}",
    )


def project_list(controller: "ListSyncController", page_size: int) -> ListView:
    """Project controller state into what the home view draws.

    A failed refresh keeps showing the last good page; the failure message is
    carried alongside so the view can show a banner.
    """
    page = controller.page
    latency = format_ms(page.server_latency_ms if page else None)
    timing = ServerTimingDisplay.render(latency, controller.page_index)
    rows = build_rows(page, page_size) if page else []

    if controller.loading:
        status = LIST_STATUS_LOADING
    elif controller.failure is not None:
        status = LIST_STATUS_ERROR
    elif controller.is_empty:
        status = LIST_STATUS_EMPTY
    else:
        status = LIST_STATUS_READY

    failure = controller.failure
    return ListView(
        status=status,
        rows=rows,
        page_index=controller.page_index,
        can_go_previous=controller.can_go_previous,
        timing=timing,
        message=failure.message if failure else "",
    )


__all__ = [
    "LIST_STATUS_EMPTY",
    "LIST_STATUS_ERROR",
    "LIST_STATUS_LOADING",
    "LIST_STATUS_READY",
    "ListView",
    "UserRow",
    "build_rows",
    "project_list",
]
