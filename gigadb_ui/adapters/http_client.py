"""Shared HTTP transport utilities for the GigaDB REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the adapter
shares one timeout policy and header construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``gigadb_ui.adapters.api_errors`` transport error types for typed
      failures.

Call context:
    - Constructed by ``gigadb_ui/adapters/user_rest.py``.
    - Used only inside adapter layer methods; use cases interact through ports.

Notes:
    Requests are never retried here. A failed call surfaces immediately and
    any retry is a fresh user action.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from gigadb_ui.adapters.api_errors import ApiTimeoutError, ApiTransportError


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
    """
    request_timeout_s: int = 10


class ApiSession:
    """Shared requests wrapper with JSON headers and typed transport errors.

    This class is intentionally transport-only. Callers provide endpoint URLs and
    decide how to map non-2xx responses into use-case errors.
    """

    def __init__(self, cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            cfg: Shared timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def get(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        """Send a GET request.

        Raises:
            ApiTimeoutError: If the request times out or cannot connect.
            ApiTransportError: For any other transport failure.
        """
        return self._send(
            "GET",
            url,
            lambda: self.session.get(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a JSON POST request.

        Side Effects:
            Serializes ``json_body`` with ``json.dumps`` before sending.
        """
        data = None if json_body is None else json.dumps(json_body)
        return self._send(
            "POST",
            url,
            lambda: self.session.post(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def delete(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        """Send a DELETE request."""
        return self._send(
            "DELETE",
            url,
            lambda: self.session.delete(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def _send(self, method: str, url: str, call) -> requests.Response:
        context = f"{method} {url}"
        try:
            return call()
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiTransportError(str(exc), context=context) from exc


__all__ = ["ApiSession", "HttpConfig"]
