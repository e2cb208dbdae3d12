from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from app.core.constants import DATE_FORMAT, FEEDER_PREFIX, HOURS_PER_DAY, NO_POWER
from app.core.models import HourStatusMap, OutageInterval, ScheduleDocument

logger = logging.getLogger("voe.report")

LINE_TEMPLATE = "Дата {date}, график {feeder}, света не будет в такие промежутки: {intervals}"


def compress_hours(hours: HourStatusMap) -> list[OutageInterval]:
    """Merge consecutive ``"no"`` hours into outage intervals.

    Hour ``N`` covers ``[N-1, N)``, so a lone outage at hour 9 becomes ``8 - 9``.
    """
    intervals: list[OutageInterval] = []
    start: int | None = None
    end = 0

    for hour in range(1, HOURS_PER_DAY + 1):
        if hours.get(str(hour)) == NO_POWER:
            if start is None:
                start = hour - 1
            end = hour
        elif start is not None:
            intervals.append(OutageInterval(start, end))
            start = None

    if start is not None:
        intervals.append(OutageInterval(start, end))

    return intervals


def feeder_label(feeder: str) -> str:
    return feeder.removeprefix(FEEDER_PREFIX)


def format_day(day_unix: int, tz: tzinfo) -> str:
    return datetime.fromtimestamp(day_unix, tz=tz).strftime(DATE_FORMAT)


def describe_schedule(document: ScheduleDocument, tz: tzinfo | str = "Europe/Kyiv") -> list[str]:
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    days: list[tuple[int, str]] = []
    for day_key in document:
        try:
            days.append((int(day_key), day_key))
        except ValueError:
            logger.warning("Skipping schedule day with non-numeric key %r", day_key)

    lines: list[str] = []
    for day_unix, day_key in sorted(days):
        date_text = format_day(day_unix, zone)
        for feeder, hours in document[day_key].items():
            intervals = compress_hours(hours)
            if not intervals:
                continue
            lines.append(
                LINE_TEMPLATE.format(
                    date=date_text,
                    feeder=feeder_label(feeder),
                    intervals=", ".join(str(interval) for interval in intervals),
                )
            )
    return lines


def format_report(document: ScheduleDocument, tz: tzinfo | str = "Europe/Kyiv") -> str:
    return "\n".join(describe_schedule(document, tz))
