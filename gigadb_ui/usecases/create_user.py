from __future__ import annotations

from dataclasses import dataclass
from typing import List

from gigadb_ui.domain.entities import MutationOutcome
from gigadb_ui.domain.ports import UseCaseError, UserPort
from gigadb_ui.usecases.error_mapping import VALIDATION_FAILED, map_api_error


def missing_fields(name: str, email: str) -> List[str]:
    """Return the labels of required create fields that are blank."""
    missing: List[str] = []
    if not str(name or "").strip():
        missing.append("name")
    if not str(email or "").strip():
        missing.append("email")
    return missing


@dataclass
class CreateUser:
    user_port: UserPort

    def __call__(self, name: str, email: str) -> MutationOutcome:
        """Validate the form fields, then issue the create request.

        Raises:
            UseCaseError: ``VALIDATION_FAILED`` before any network call when a
                field is blank; mapped adapter errors otherwise.
        """
        missing = missing_fields(name, email)
        if missing:
            raise UseCaseError(
                VALIDATION_FAILED,
                f"Required field(s) missing: {', '.join(missing)}.",
            )
        try:
            return self.user_port.create_user(str(name).strip(), str(email).strip())
        except Exception as exc:
            raise map_api_error(exc, default_message="Failed to create user") from exc
