from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from app.errors import FetchError
from app.parsers.script_extractor import ScriptAssignmentExtractor


@dataclass
class SchedulePageProvider:
    page_url: str
    timeout_seconds: float | None = None
    extractor: ScriptAssignmentExtractor = field(default_factory=ScriptAssignmentExtractor)

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"follow_redirects": True}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout_seconds)
        return kwargs

    async def fetch_page(self) -> str:
        if not self.page_url:
            raise FetchError("API_URL is empty")

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.get(self.page_url)
        except httpx.HTTPError as exc:
            raise FetchError(f"Request to {self.page_url} failed: {exc}") from exc

        if not response.is_success:
            raise FetchError(
                f"HTTP error: {response.status_code}", status_code=response.status_code
            )

        logging.getLogger("voe.extractor").debug(
            "Fetched %s (%d bytes)", response.url, len(response.content)
        )
        return response.text

    async def fetch_fact(self) -> Any | None:
        html = await self.fetch_page()
        return self.extractor.extract(html)
