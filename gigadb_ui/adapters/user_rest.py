from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from gigadb_ui.domain.entities import MutationOutcome, Page, User, UserDetail
from gigadb_ui.domain.ports import UserId, UserPort

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiRejectedError,
    ApiServerError,
    build_error_message,
    first_string,
    parse_error_payload,
)
from .http_client import ApiSession, HttpConfig

_log = logging.getLogger(__name__)

DEFAULT_USER_PATH = "/{user_id}"


class UserRestAdapter(UserPort):
    """REST adapter for the GigaDB user endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        request_timeout_s: int = 10,
        user_path_template: str = DEFAULT_USER_PATH,
    ) -> None:
        if not base_url or not str(base_url).strip():
            raise ValueError("UserRestAdapter requires a base URL")
        if "{user_id}" not in user_path_template:
            raise ValueError("user_path_template must contain '{user_id}'")

        self.base_url = str(base_url).strip().rstrip("/")
        self.user_path_template = user_path_template
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = ApiSession(self.cfg)

    def get_user(self, user_id: UserId) -> UserDetail:
        ctx = f"user[{user_id}]"
        path = self.user_path_template.format(user_id=quote(str(user_id), safe=""))
        resp = self.session.get(self._make_url(path))
        self._ensure_ok(resp, ctx)
        data = self._json_object(resp, ctx)
        if not data.get("success"):
            raise ApiRejectedError(
                first_string(data) or f"{ctx}: user not found",
                status=resp.status_code,
                payload=data,
                context=ctx,
            )
        user = self._parse_user(data.get("user"), ctx)
        return UserDetail(user=user, server_latency_ms=self._latency(data, "time_ms"))

    def get_page(self, index: int) -> Page:
        ctx = f"page[{index}]"
        resp = self.session.get(self._make_url(f"/users/page/{int(index)}"))
        self._ensure_ok(resp, ctx)
        data = self._json_object(resp, ctx)
        raw_users = data.get("users")
        if raw_users is None:
            raw_users = []
        if not isinstance(raw_users, list):
            raise ApiError(f"{ctx}: expected 'users' list", payload=data, context=ctx)

        users: List[User] = []
        for entry in raw_users:
            if not isinstance(entry, dict):
                continue
            try:
                users.append(User.from_payload(entry))
            except ValueError as exc:
                _log.warning("%s: skipping malformed user entry: %s", ctx, exc)
        return Page(
            index=int(index),
            items=tuple(users),
            server_latency_ms=self._latency(data, "time_taken"),
        )

    def create_user(self, name: str, email: str) -> MutationOutcome:
        ctx = "create_user"
        resp = self.session.post(
            self._make_url("/users"),
            json_body={"name": name, "email": email},
        )
        self._ensure_ok(resp, ctx)
        data = self._json_object(resp, ctx)
        user = self._parse_user(data.get("user"), ctx)
        return MutationOutcome(entity=user, server_latency_ms=self._latency(data, "time_taken"))

    def delete_user(self, user_id: UserId) -> None:
        ctx = f"delete_user[{user_id}]"
        resp = self.session.delete(self._make_url(f"/users/{quote(str(user_id), safe='')}"))
        self._ensure_ok(resp, ctx)
        data = self._json_object(resp, ctx)
        if not data.get("success"):
            raise ApiRejectedError(
                first_string(data) or "Delete rejected by server",
                status=resp.status_code,
                payload=data,
                context=ctx,
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    @staticmethod
    def _parse_user(raw: Any, ctx: str) -> User:
        if not isinstance(raw, dict):
            raise ApiError(f"{ctx}: expected 'user' object", payload=raw, context=ctx)
        try:
            return User.from_payload(raw)
        except ValueError as exc:
            raise ApiError(f"{ctx}: {exc}", payload=raw, context=ctx) from exc

    @staticmethod
    def _latency(data: Dict[str, Any], key: str) -> Optional[float]:
        value = data.get(key)
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        if 400 <= status < 500:
            raise ApiClientError(message, status=status, payload=payload, context=ctx)
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, payload=payload, context=ctx)
        raise ApiError(message, status=status, payload=payload, context=ctx)

    @staticmethod
    def _json_object(resp: requests.Response, ctx: str) -> Dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc
        if not isinstance(data, dict):
            raise ApiError(f"{ctx}: expected object response", payload=data, context=ctx)
        return data


__all__ = ["DEFAULT_USER_PATH", "UserRestAdapter"]
