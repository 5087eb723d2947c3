"""Domain package exports for value objects and ports."""

from .entities import (
    Failure,
    Idle,
    MutationOutcome,
    Page,
    Pending,
    RequestState,
    Role,
    Success,
    User,
    UserDetail,
)
from .ports import TaskRunner, UseCaseError, UserId, UserPort

__all__ = [
    "Failure",
    "Idle",
    "MutationOutcome",
    "Page",
    "Pending",
    "RequestState",
    "Role",
    "Success",
    "TaskRunner",
    "UseCaseError",
    "User",
    "UserDetail",
    "UserId",
    "UserPort",
]
