from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import tzinfo

from app.core.filtering import filter_feeders
from app.core.intervals import describe_schedule, format_report
from app.core.models import ScheduleDocument
from app.core.serialization import to_schedule_fact
from app.errors import NotFoundError
from app.providers.base import ScheduleSource

logger = logging.getLogger("voe.report")


async def load_filtered_schedule(source: ScheduleSource, keep: Iterable[str]) -> ScheduleDocument:
    payload = await source.fetch_fact()
    if payload is None:
        raise NotFoundError("Schedule data was not found on the page")

    fact = to_schedule_fact(payload)
    filtered = filter_feeders(fact.data, keep)
    logger.info(
        "Loaded schedule: %d day(s), today=%s, update=%s",
        len(filtered),
        fact.today_unix,
        fact.update_text,
    )
    return filtered


async def get_outage_lines(
    source: ScheduleSource,
    keep: Iterable[str],
    tz: tzinfo | str = "Europe/Kyiv",
) -> list[str]:
    return describe_schedule(await load_filtered_schedule(source, keep), tz)


async def get_outage_report(
    source: ScheduleSource,
    keep: Iterable[str],
    tz: tzinfo | str = "Europe/Kyiv",
) -> str:
    return format_report(await load_filtered_schedule(source, keep), tz)
