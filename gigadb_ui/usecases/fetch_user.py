from __future__ import annotations

from dataclasses import dataclass

from gigadb_ui.domain.entities import UserDetail
from gigadb_ui.domain.ports import UseCaseError, UserId, UserPort
from gigadb_ui.usecases.error_mapping import NOT_FOUND, map_api_error


@dataclass
class FetchUser:
    user_port: UserPort

    def __call__(self, user_id: UserId) -> UserDetail:
        token = str(user_id or "").strip()
        if not token:
            raise UseCaseError(NOT_FOUND, "User not found.")
        try:
            return self.user_port.get_user(token)
        except Exception as exc:
            raise map_api_error(exc, rejection_is_not_found=True) from exc
