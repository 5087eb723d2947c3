from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, List, Set
from uuid import uuid4

from gigadb_ui.adapters.api_errors import ApiClientError, ApiRejectedError
from gigadb_ui.domain.entities import MutationOutcome, Page, Role, User, UserDetail
from gigadb_ui.domain.ports import UserId, UserPort

_SEED_NAMES = (
    "Ada Lovelace",
    "Alan Turing",
    "Grace Hopper",
    "Edsger Dijkstra",
    "Barbara Liskov",
    "Donald Knuth",
    "Margaret Hamilton",
    "Ken Thompson",
)


@dataclass
class UserRestMock(UserPort):
    """Offline substitute for ``UserRestAdapter`` with deterministic data.

    Users listed in ``locked_ids`` refuse deletion with ``msg="locked"`` the
    same way the service reports soft-delete conflicts.
    """

    page_size: int = 20
    seed_count: int = 0
    locked_ids: Set[UserId] = field(default_factory=set)

    def __post_init__(self) -> None:
        self._users: Dict[UserId, User] = {}
        for idx in range(self.seed_count):
            name = _SEED_NAMES[idx % len(_SEED_NAMES)]
            user_id = f"{idx + 1:04d}"
            self._users[user_id] = User(
                id=user_id,
                name=name,
                email=f"{name.split()[0].lower()}{idx + 1}@gigadb.net",
                role=Role.ADMIN if idx % 5 == 0 else Role.USER,
            )

    # ---------- UserPort ----------

    def get_user(self, user_id: UserId) -> UserDetail:
        started = time.perf_counter()
        user = self._users.get(str(user_id))
        if user is None:
            raise ApiClientError(
                f"user[{user_id}]: not found (HTTP 404)",
                status=404,
                payload={"success": False},
                context=f"user[{user_id}]",
            )
        return UserDetail(user=user, server_latency_ms=_elapsed_ms(started))

    def get_page(self, index: int) -> Page:
        started = time.perf_counter()
        ordered: List[User] = list(self._users.values())
        start = (int(index) - 1) * self.page_size
        items = tuple(ordered[start:start + self.page_size])
        return Page(index=int(index), items=items, server_latency_ms=_elapsed_ms(started))

    def create_user(self, name: str, email: str) -> MutationOutcome:
        started = time.perf_counter()
        user = User(id=str(uuid4()), name=name, email=email, role=Role.USER)
        self._users[user.id] = user
        return MutationOutcome(entity=user, server_latency_ms=_elapsed_ms(started))

    def delete_user(self, user_id: UserId) -> None:
        key = str(user_id)
        if key in self.locked_ids:
            raise ApiRejectedError("locked", payload={"success": False, "msg": "locked"})
        if self._users.pop(key, None) is None:
            raise ApiRejectedError(
                "User not found",
                payload={"success": False, "msg": "User not found"},
            )


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


__all__ = ["UserRestMock"]
