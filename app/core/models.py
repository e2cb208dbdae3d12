from __future__ import annotations

from dataclasses import dataclass

HourStatusMap = dict[str, str]
FeederSchedule = dict[str, HourStatusMap]
ScheduleDocument = dict[str, FeederSchedule]


@dataclass(frozen=True)
class OutageInterval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end <= 24:
            raise ValueError(f"Invalid outage interval: {self.start} - {self.end}")

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class ScheduleFact:
    data: ScheduleDocument
    update_text: str | None = None
    today_unix: int | None = None
