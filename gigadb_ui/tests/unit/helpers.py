from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from gigadb_ui.domain.entities import MutationOutcome, Page, Role, User, UserDetail


class FakeTimers:
    """Manual clock with Tk-style ``after``/``after_cancel``."""

    def __init__(self) -> None:
        self.now_ms = 0
        self._seq = 0
        self._pending: Dict[int, Tuple[int, Callable[[], None]]] = {}

    def after(self, delay_ms: int, callback: Callable[[], None]) -> int:
        self._seq += 1
        self._pending[self._seq] = (self.now_ms + int(delay_ms), callback)
        return self._seq

    def after_cancel(self, token: int) -> None:
        self._pending.pop(token, None)

    def advance(self, ms: int) -> None:
        target = self.now_ms + int(ms)
        while True:
            due = [(when, token) for token, (when, _) in self._pending.items() if when <= target]
            if not due:
                break
            when, token = min(due)
            _, callback = self._pending.pop(token)
            self.now_ms = when
            callback()
        self.now_ms = target

    def clock(self) -> float:
        return self.now_ms / 1000.0

    @property
    def pending_count(self) -> int:
        return len(self._pending)


@dataclass
class _Job:
    work: Callable[[], Any]
    on_done: Callable[[Any], None]
    on_error: Callable[[Exception], None]


class ManualRunner:
    """Task runner whose jobs complete only when the test says so."""

    def __init__(self) -> None:
        self.jobs: List[_Job] = []

    def submit(self, work, on_done, on_error) -> None:
        self.jobs.append(_Job(work, on_done, on_error))

    def complete(self, index: int = 0) -> None:
        job = self.jobs.pop(index)
        try:
            result = job.work()
        except Exception as exc:
            job.on_error(exc)
            return
        job.on_done(result)

    def complete_all(self) -> None:
        while self.jobs:
            self.complete(0)


Response = Union[Any, Exception]


@dataclass
class StubUserPort:
    """In-memory ``UserPort`` that records calls and replays scripted results."""

    pages: Dict[int, Response] = field(default_factory=dict)
    users: Dict[str, Response] = field(default_factory=dict)
    create_result: Optional[Response] = None
    delete_results: List[Optional[Exception]] = field(default_factory=list)
    calls: List[Tuple[str, Any]] = field(default_factory=list)

    def get_page(self, index: int) -> Page:
        self.calls.append(("get_page", index))
        return self._resolve(self.pages.get(index, Page(index=index)))

    def get_user(self, user_id: str) -> UserDetail:
        self.calls.append(("get_user", user_id))
        return self._resolve(self.users[user_id])

    def create_user(self, name: str, email: str) -> MutationOutcome:
        self.calls.append(("create_user", (name, email)))
        return self._resolve(self.create_result)

    def delete_user(self, user_id: str) -> None:
        self.calls.append(("delete_user", user_id))
        outcome = self.delete_results.pop(0) if self.delete_results else None
        if outcome is not None:
            raise outcome

    def calls_named(self, name: str) -> List[Any]:
        return [arg for call, arg in self.calls if call == name]

    @staticmethod
    def _resolve(value: Response) -> Any:
        if isinstance(value, Exception):
            raise value
        return value


def make_user(user_id: str, name: str = "Ada Lovelace", role: Role = Role.USER) -> User:
    return User(id=user_id, name=name, email=f"{user_id}@example.org", role=role)


def make_page(index: int, count: int, latency: float = 0.25) -> Page:
    start = (index - 1) * count
    items = tuple(make_user(f"u{start + n + 1}", name=f"User {start + n + 1}") for n in range(count))
    return Page(index=index, items=items, server_latency_ms=latency)


__all__ = [
    "FakeTimers",
    "ManualRunner",
    "StubUserPort",
    "make_page",
    "make_user",
]
