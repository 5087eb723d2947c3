from __future__ import annotations

from dataclasses import dataclass

from gigadb_ui.domain.entities import Page
from gigadb_ui.domain.ports import UserPort
from gigadb_ui.usecases.error_mapping import map_api_error


@dataclass
class FetchUserPage:
    user_port: UserPort

    def __call__(self, index: int) -> Page:
        """Fetch one page of users; an empty page is a valid result."""
        if int(index) < 1:
            raise ValueError("Page index must be a positive integer.")
        try:
            return self.user_port.get_page(int(index))
        except Exception as exc:
            raise map_api_error(exc) from exc
