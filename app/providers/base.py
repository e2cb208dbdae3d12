from __future__ import annotations

from typing import Any, Protocol


class ScheduleSource(Protocol):
    async def fetch_fact(self) -> Any | None:
        """Fetch the page and return the embedded schedule value, or None when absent."""
