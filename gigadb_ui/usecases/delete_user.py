from __future__ import annotations

from dataclasses import dataclass

from gigadb_ui.domain.ports import UseCaseError, UserId, UserPort
from gigadb_ui.usecases.error_mapping import VALIDATION_FAILED, map_api_error


@dataclass
class DeleteUser:
    user_port: UserPort

    def __call__(self, user_id: UserId) -> None:
        token = str(user_id or "").strip()
        if not token:
            raise UseCaseError(VALIDATION_FAILED, "Missing user id.")
        try:
            self.user_port.delete_user(token)
        except Exception as exc:
            raise map_api_error(exc) from exc
