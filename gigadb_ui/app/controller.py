"""Adapter and use-case wiring for the browser runtime.

This module owns lazy construction of the concrete REST adapter and the
use-case objects that depend on :class:`gigadb_ui.app.settings.AppConfig`.
Page-level controllers receive the use cases from here.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.user_rest import UserRestAdapter
from ..adapters.user_rest_mock import UserRestMock
from ..domain.ports import UserPort
from ..usecases.create_user import CreateUser
from ..usecases.delete_user import DeleteUser
from ..usecases.fetch_user import FetchUser
from ..usecases.fetch_user_page import FetchUserPage
from .settings import AppConfig


class AppController:
    """Create and cache the runtime adapter and use-cases from configuration.

    Call chain:
        ``gigadb_ui.web_ui.main`` creates one instance per process and asks it
        for use cases when building page controllers. A missing base URL makes
        ``ensure_ready`` return ``False``; the page controllers then render a
        configuration error instead of crashing.
    """

    def __init__(self, config: AppConfig) -> None:
        self._log = logging.getLogger(__name__)
        self.config = config
        self._user_adapter: Optional[UserPort] = None
        self.uc_fetch_page: Optional[FetchUserPage] = None
        self.uc_fetch_user: Optional[FetchUser] = None
        self.uc_create_user: Optional[CreateUser] = None
        self.uc_delete_user: Optional[DeleteUser] = None

    @property
    def user_adapter(self) -> Optional[UserPort]:
        """Return the cached adapter used for all user requests."""
        return self._user_adapter

    def reset(self) -> None:
        """Drop cached adapter and use-cases so the next call rebuilds them."""
        self._user_adapter = None
        self.uc_fetch_page = None
        self.uc_fetch_user = None
        self.uc_create_user = None
        self.uc_delete_user = None

    def ensure_ready(self) -> bool:
        """Ensure the adapter and use-cases are available.

        Returns:
            ``True`` when dependencies are available, ``False`` when the base
            URL is missing and the mock adapter is not requested.
        """
        if self._user_adapter is not None:
            return True

        if self.config.use_mock:
            self._user_adapter = UserRestMock(page_size=self.config.page_size, seed_count=45)
            self._log.info("Using offline mock adapter")
        elif self.config.has_api_url:
            try:
                self._user_adapter = UserRestAdapter(
                    str(self.config.api_base_url),
                    request_timeout_s=self.config.request_timeout_s,
                    user_path_template=self.config.user_path_template,
                )
            except ValueError as exc:
                self._log.error("Invalid API configuration: %s", exc)
                return False
        else:
            self._log.error("API URL missing; remote operations are disabled")
            return False

        self.uc_fetch_page = FetchUserPage(self._user_adapter)
        self.uc_fetch_user = FetchUser(self._user_adapter)
        self.uc_create_user = CreateUser(self._user_adapter)
        self.uc_delete_user = DeleteUser(self._user_adapter)
        return True


__all__ = ["AppController"]
