from __future__ import annotations

from app.config import Settings
from app.errors import UnknownProviderError
from app.providers.base import ScheduleSource
from app.providers.schedule_page import SchedulePageProvider


def build_provider(settings: Settings) -> ScheduleSource:
    if settings.provider_kind == "voe_html":
        return SchedulePageProvider(
            page_url=settings.provider_url,
            timeout_seconds=settings.provider_timeout_seconds,
        )

    raise UnknownProviderError(f"Unsupported provider kind: {settings.provider_kind}")
