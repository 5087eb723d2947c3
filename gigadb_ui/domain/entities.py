"""Domain value objects shared across adapters, use-cases, and controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class Role(str, Enum):
    """Access role reported by the service for a user."""

    ADMIN = "Admin"
    USER = "User"

    @classmethod
    def parse(cls, value: Any) -> "Role":
        text = str(value or "").strip().lower()
        if text == "admin":
            return cls.ADMIN
        return cls.USER


@dataclass(frozen=True)
class User:
    """Single domain record displayed, created, and deleted by the UI."""

    id: str
    """Opaque identifier assigned by the service, preserved verbatim."""

    name: str
    email: str = ""
    role: Role = Role.USER
    bio: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("User id must be a non-empty string.")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "User":
        """Build a user from a service JSON object.

        Numeric identifiers from older service builds are stringified.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("User payload must be an object.")
        raw_id = payload.get("id")
        if raw_id is None:
            raise ValueError("User payload is missing 'id'.")
        bio = payload.get("bio")
        return cls(
            id=str(raw_id),
            name=str(payload.get("name") or ""),
            email=str(payload.get("email") or ""),
            role=Role.parse(payload.get("role")),
            bio=str(bio) if bio else None,
        )


@dataclass(frozen=True)
class Page:
    """One page of users as returned by the service.

    There is no total count, so an empty ``items`` tuple is a normal terminal
    page rather than an error.
    """

    index: int
    items: Tuple[User, ...] = field(default_factory=tuple)
    server_latency_ms: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.index, int) or self.index < 1:
            raise ValueError("Page index must be a positive integer.")

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class UserDetail:
    """A fetched user plus the lookup latency the service measured."""

    user: User
    server_latency_ms: Optional[float] = None


@dataclass(frozen=True)
class MutationOutcome:
    """Result of a successful create request."""

    entity: User
    server_latency_ms: Optional[float] = None


# ---- Request state ----
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Failure:
    code: str
    message: str


RequestState = Union[Idle, Pending, Success, Failure]


__all__ = [
    "Failure",
    "Idle",
    "MutationOutcome",
    "Page",
    "Pending",
    "RequestState",
    "Role",
    "Success",
    "User",
    "UserDetail",
]
