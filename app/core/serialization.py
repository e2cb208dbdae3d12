from __future__ import annotations

from typing import Any

from app.core.models import FeederSchedule, HourStatusMap, ScheduleDocument, ScheduleFact
from app.errors import EmptyPayloadError, UpstreamStatusError


def normalize_hours(raw: Any) -> HourStatusMap:
    if not isinstance(raw, dict):
        return {}
    return {str(hour): str(status) for hour, status in raw.items()}


def normalize_document(data: dict[Any, Any]) -> ScheduleDocument:
    document: ScheduleDocument = {}
    for day_key, feeders in data.items():
        day: FeederSchedule = {}
        if isinstance(feeders, dict):
            for feeder, hours in feeders.items():
                day[str(feeder)] = normalize_hours(hours)
        document[str(day_key)] = day
    return document


def is_day_keyed(payload: dict[Any, Any]) -> bool:
    """True for a bare ``{timestamp: {feeder: hours}}`` document without the ``data`` wrapper."""
    return bool(payload) and all(
        str(key).isdigit() and isinstance(value, dict) for key, value in payload.items()
    )


def _as_optional_int(raw: Any) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def to_schedule_fact(payload: Any) -> ScheduleFact:
    if isinstance(payload, dict) and "data" not in payload and is_day_keyed(payload):
        return ScheduleFact(data=normalize_document(payload))

    if not isinstance(payload, dict) or not payload.get("data"):
        raise EmptyPayloadError("Schedule payload has no data field")

    status = payload.get("status")
    if status is not None and status != "ok":
        raise UpstreamStatusError(status)

    data = payload["data"]
    if not isinstance(data, dict):
        raise EmptyPayloadError("Schedule data field is not a mapping")

    update = payload.get("update")
    return ScheduleFact(
        data=normalize_document(data),
        update_text=update if isinstance(update, str) else None,
        today_unix=_as_optional_int(payload.get("today")),
    )
