from __future__ import annotations

from collections.abc import Iterable

from app.core.models import ScheduleDocument


def filter_feeders(document: ScheduleDocument, keep: Iterable[str]) -> ScheduleDocument:
    """Restrict every day of ``document`` to the feeders listed in ``keep``.

    Days are never dropped: a day without matching feeders maps to ``{}``.
    """
    keep_set = frozenset(keep)
    return {
        day_key: {feeder: hours for feeder, hours in feeders.items() if feeder in keep_set}
        for day_key, feeders in document.items()
    }
