from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for REST adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the GigaDB service."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiServerError(ApiError):
    """HTTP 5xx from the GigaDB service."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiRejectedError(ApiError):
    """2xx response whose body reports ``success: false``."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload, context=context)


class ApiTransportError(ApiError):
    """Request could not complete (no HTTP response was received)."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


class ApiTimeoutError(ApiTransportError):
    """Transport level timeout or connectivity failure."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, context=context)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of error payload without raising."""
    try:
        return resp.json()
    except ValueError:
        snippet = getattr(resp, "text", "")
        if not snippet:
            return None
        return snippet[:400]


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    detail = first_string(payload)
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


def first_string(payload: Any) -> Optional[str]:
    if isinstance(payload, str):
        text = payload.strip()
        return text or None
    if isinstance(payload, dict):
        for key in ("msg", "message", "detail", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            if isinstance(value, (list, dict)):
                candidate = first_string(value)
                if candidate:
                    return candidate
    if isinstance(payload, list):
        for item in payload:
            candidate = first_string(item)
            if candidate:
                return candidate
    return None


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiRejectedError",
    "ApiServerError",
    "ApiTimeoutError",
    "ApiTransportError",
    "build_error_message",
    "first_string",
    "parse_error_payload",
]
