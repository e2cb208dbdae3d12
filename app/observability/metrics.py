from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry(auto_describe=True)
        self.reports_total = Counter(
            "voe_reports_total",
            "Total outage report requests by status",
            labelnames=("status",),
            registry=self.registry,
        )
        self.report_duration_seconds = Histogram(
            "voe_report_duration_seconds",
            "Duration of outage report requests in seconds",
            registry=self.registry,
        )
        self.messages_sent_total = Counter(
            "voe_messages_sent_total",
            "Total chat messages sent with report chunks",
            registry=self.registry,
        )

    def mark_report_status(self, status: str) -> None:
        self.reports_total.labels(status=status).inc()

    def observe_report_duration(self, seconds: float) -> None:
        self.report_duration_seconds.observe(seconds)

    def mark_messages_sent(self, count: int) -> None:
        self.messages_sent_total.inc(count)

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
