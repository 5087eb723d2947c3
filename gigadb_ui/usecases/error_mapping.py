"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from gigadb_ui.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiRejectedError,
    ApiServerError,
    ApiTransportError,
    first_string,
)
from gigadb_ui.domain.ports import UseCaseError

CONFIG_MISSING = "CONFIG_MISSING"
NETWORK_FAILURE = "NETWORK_FAILURE"
NOT_FOUND = "NOT_FOUND"
VALIDATION_FAILED = "VALIDATION_FAILED"
SERVICE_REJECTED = "SERVICE_REJECTED"


def map_api_error(
    exc: Exception,
    *,
    default_code: str = SERVICE_REJECTED,
    default_message: Optional[str] = None,
    rejection_is_not_found: bool = False,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by an adapter or use case.
        default_code: Code used for exceptions outside the ``ApiError`` tree.
        default_message: Message used for exceptions outside the ``ApiError``
            tree when they carry no text.
        rejection_is_not_found: Treat ``success: false`` bodies as
            ``NOT_FOUND`` (single-user lookups).

    Returns:
        UseCaseError carrying one of the module-level codes.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTransportError):
        return UseCaseError(NETWORK_FAILURE, "Error connecting to server.")
    if isinstance(exc, ApiRejectedError):
        if rejection_is_not_found:
            return UseCaseError(NOT_FOUND, "User not found.")
        detail = first_string(exc.payload) or str(exc)
        return UseCaseError(SERVICE_REJECTED, detail)
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        if status == 404:
            return UseCaseError(NOT_FOUND, "User not found.")
        detail = first_string(exc.payload)
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError(SERVICE_REJECTED, _compose_error_message(label, detail))
    if isinstance(exc, ApiServerError):
        return UseCaseError(SERVICE_REJECTED, "Server error, try again.")
    if isinstance(exc, ApiError):
        return UseCaseError(SERVICE_REJECTED, str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = [
    "CONFIG_MISSING",
    "NETWORK_FAILURE",
    "NOT_FOUND",
    "SERVICE_REJECTED",
    "VALIDATION_FAILED",
    "map_api_error",
]
