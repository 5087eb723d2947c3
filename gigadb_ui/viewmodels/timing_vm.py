from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ServerTimingView:
    """Badges shown in the top-right corner of a page."""

    latency: str
    page: Optional[str] = None


class ServerTimingDisplay:
    """Pure projection of a caller-formatted latency and optional page number."""

    @staticmethod
    def render(
        latency: Optional[str],
        page: Optional[Union[int, str]] = None,
    ) -> Optional[ServerTimingView]:
        """Return the badges to draw, or ``None`` when there is no latency.

        Values are shown exactly as given; callers own any rounding.
        """
        if latency is None or latency == "":
            return None
        page_label = None if page is None or page == "" else str(page)
        return ServerTimingView(latency=str(latency), page=page_label)


def format_ms(value: Optional[float], *, decimals: Optional[int] = 4, default: float = 0.0) -> str:
    """Format a service latency for ``ServerTimingDisplay`` callers.

    ``decimals=None`` keeps the service value as reported.
    """
    number = default if value is None else value
    if decimals is None:
        text = str(int(number)) if float(number).is_integer() else str(number)
        return f"{text} ms"
    return f"{number:.{decimals}f} ms"


__all__ = ["ServerTimingDisplay", "ServerTimingView", "format_ms"]
