from __future__ import annotations

from typing import Final

DEFAULT_KEEP_FEEDERS: Final[tuple[str, ...]] = ("GPV5.1", "GPV3.2")
FEEDER_PREFIX: Final[str] = "GPV"

HOURS_PER_DAY: Final[int] = 24
NO_POWER: Final[str] = "no"

SCHEDULE_MARKER: Final[str] = "DisconSchedule.fact"
MAX_MESSAGE_LENGTH: Final[int] = 4000

DATE_FORMAT: Final[str] = "%d.%m.%Y"
