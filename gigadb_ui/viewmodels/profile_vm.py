from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.entities import MutationOutcome, Role, UserDetail
from .timing_vm import ServerTimingDisplay, ServerTimingView, format_ms

EMAIL_DOMAIN = "gigadb.net"
BIO_FALLBACK = "No bio data available in the secure vault."


@dataclass(frozen=True)
class ProfileCard:
    """Everything the profile page draws for one user."""

    user_id: str
    name: str
    email: str
    role: str
    is_admin: bool
    bio: str
    latency_label: str
    timing: Optional[ServerTimingView]


def fallback_email(user_id: str) -> str:
    return f"user_{user_id}@{EMAIL_DOMAIN}"


def project_profile(detail: UserDetail) -> ProfileCard:
    user = detail.user
    # The detail page shows the lookup latency as reported, without rounding.
    latency = format_ms(detail.server_latency_ms, decimals=None, default=0)
    return ProfileCard(
        user_id=user.id,
        name=user.name,
        email=user.email or fallback_email(user.id),
        role=user.role.value,
        is_admin=user.role is Role.ADMIN,
        bio=user.bio or BIO_FALLBACK,
        latency_label=latency,
        timing=ServerTimingDisplay.render(latency),
    )


def not_found_message(user_id: Optional[str]) -> str:
    return f"ERROR 404: USER_ID NOT FOUND IN SECTOR {user_id or '?'}"


@dataclass(frozen=True)
class CreatedCard:
    """Result view shown after a successful create."""

    user_id: str
    name: str
    href: str
    write_latency: Optional[str]


def project_created(outcome: MutationOutcome) -> CreatedCard:
    user = outcome.entity
    latency = outcome.server_latency_ms
    return CreatedCard(
        user_id=user.id,
        name=user.name,
        href=f"/{user.id}",
        write_latency=format_ms(latency) if latency is not None else None,
    )


__all__ = [
    "BIO_FALLBACK",
    "CreatedCard",
    "ProfileCard",
    "fallback_email",
    "not_found_message",
    "project_created",
    "project_profile",
]
