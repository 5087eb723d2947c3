"""Immutable runtime configuration for the GigaDB browser.

Configuration is read once (``load_config``) and passed explicitly into the
app controller and the view controllers; nothing below this module reads the
process environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from gigadb_ui.adapters.user_rest import DEFAULT_USER_PATH

_log = logging.getLogger(__name__)

API_URL_ENV_VARS = ("GIGADB_API_URL", "NEXT_PUBLIC_API_URL")


@dataclass(frozen=True)
class AppConfig:
    """Typed runtime settings.

    Attributes:
        api_base_url: Base URL of the GigaDB service, or ``None`` when not
            configured (views degrade to an error/empty state).
        request_timeout_s: Timeout for each HTTP request.
        page_size: Items per page the service returns; used for serial numbers.
        list_debounce_ms: Delay after the last page change before fetching.
        feedback_ms: Lifetime of ephemeral confirmations such as "Copied!".
        user_path_template: Path for single-user lookups.
        use_mock: Serve data from the in-memory mock adapter.
    """

    api_base_url: Optional[str] = None
    request_timeout_s: int = 10
    page_size: int = 20
    list_debounce_ms: int = 500
    feedback_ms: int = 2000
    user_path_template: str = DEFAULT_USER_PATH
    use_mock: bool = False

    @property
    def has_api_url(self) -> bool:
        return bool(self.api_base_url and self.api_base_url.strip())


def _coerce_positive_int(value: Optional[str], fallback: int, name: str) -> int:
    if value is None or not value.strip():
        return fallback
    try:
        parsed = int(value.strip())
    except ValueError:
        _log.warning("Ignoring non-integer %s=%r", name, value)
        return fallback
    if parsed < 1:
        _log.warning("Ignoring non-positive %s=%r", name, value)
        return fallback
    return parsed


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an ``AppConfig`` from environment-style variables.

    Environment keys:
      - GIGADB_API_URL / NEXT_PUBLIC_API_URL: service base URL
      - GIGADB_REQUEST_TIMEOUT_S: request timeout in seconds
      - GIGADB_PAGE_SIZE: service page size
      - GIGADB_USER_PATH: single-user path template (default ``/{user_id}``)
      - GIGADB_USE_MOCK: truthy -> offline mock adapter
    """
    env = os.environ if environ is None else environ
    api_url = None
    for var in API_URL_ENV_VARS:
        value = (env.get(var) or "").strip()
        if value:
            api_url = value
            break
    if api_url is None:
        _log.error("API URL not found; set %s", " or ".join(API_URL_ENV_VARS))

    user_path = (env.get("GIGADB_USER_PATH") or "").strip() or DEFAULT_USER_PATH
    if "{user_id}" not in user_path:
        _log.warning("Ignoring GIGADB_USER_PATH=%r without {user_id}", user_path)
        user_path = DEFAULT_USER_PATH
    use_mock = (env.get("GIGADB_USE_MOCK") or "").strip().lower() in {"1", "true", "yes", "on"}
    return AppConfig(
        api_base_url=api_url,
        request_timeout_s=_coerce_positive_int(
            env.get("GIGADB_REQUEST_TIMEOUT_S"), 10, "GIGADB_REQUEST_TIMEOUT_S"
        ),
        page_size=_coerce_positive_int(env.get("GIGADB_PAGE_SIZE"), 20, "GIGADB_PAGE_SIZE"),
        user_path_template=user_path,
        use_mock=use_mock,
    )


__all__ = ["API_URL_ENV_VARS", "AppConfig", "load_config"]
