from __future__ import annotations


class ConfigError(RuntimeError):
    pass


class UnknownProviderError(RuntimeError):
    pass


class ScheduleError(RuntimeError):
    """Base class for failures while building an outage report."""


class FetchError(ScheduleError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ScheduleError):
    pass


class ParseError(ScheduleError):
    pass


class EmptyPayloadError(ScheduleError):
    pass


class UpstreamStatusError(ScheduleError):
    def __init__(self, status: object) -> None:
        super().__init__(f"Upstream returned status: {status}")
        self.status = status
