from __future__ import annotations

import logging

import httpx
import pytest

from app.errors import EmptyPayloadError, FetchError, NotFoundError
from app.providers.schedule_page import SchedulePageProvider
from app.services.report import get_outage_lines, get_outage_report
from tests.helpers import FakeSource, sample_fact, schedule_page


def _serve(monkeypatch, html: str) -> None:
    real_client = httpx.AsyncClient

    def _client_factory(*args, **kwargs):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text=html))
        return real_client(*args, transport=transport, **kwargs)

    monkeypatch.setattr("app.providers.schedule_page.httpx.AsyncClient", _client_factory)


@pytest.mark.asyncio
async def test_report_filters_and_formats() -> None:
    source = FakeSource(sample_fact())

    text = await get_outage_report(source, ["GPV5.1", "GPV3.2"])

    assert text.split("\n") == [
        "Дата 15.11.2023, график 3.2, света не будет в такие промежутки: 23 - 24",
        "Дата 15.11.2023, график 5.1, света не будет в такие промежутки: 8 - 10",
    ]
    assert source.calls == 1


@pytest.mark.asyncio
async def test_report_from_page_with_bare_schedule(monkeypatch) -> None:
    _serve(
        monkeypatch,
        schedule_page(
            "DisconSchedule.fact = {'1700000000': {'GPV5.1': {'9':'no','10':'no','11':'yes'}}}"
        ),
    )

    text = await get_outage_report(
        SchedulePageProvider(page_url="https://example.test/schedule"), ["GPV5.1"]
    )

    assert text == "Дата 15.11.2023, график 5.1, света не будет в такие промежутки: 8 - 10"


@pytest.mark.asyncio
async def test_report_from_page_with_data_wrapper(monkeypatch, caplog) -> None:
    _serve(
        monkeypatch,
        schedule_page(
            "DisconSchedule.fact = {data: {'1700000000': {'GPV5.1': {'9':'no','10':'no'},"
            " 'GPV1.1': {'1':'no'}}}, update: '15.11.2023 00:13', today: 1700000000};"
        ),
    )

    with caplog.at_level(logging.INFO, logger="voe.report"):
        lines = await get_outage_lines(
            SchedulePageProvider(page_url="https://example.test/schedule"), ["GPV5.1"]
        )

    assert lines == ["Дата 15.11.2023, график 5.1, света не будет в такие промежутки: 8 - 10"]
    assert "today=1700000000" in caplog.text


@pytest.mark.asyncio
async def test_report_is_empty_when_kept_feeders_have_power() -> None:
    lines = await get_outage_lines(FakeSource(sample_fact()), ["GPV1.1"])

    assert lines == []


@pytest.mark.asyncio
async def test_report_raises_not_found_for_missing_marker() -> None:
    with pytest.raises(NotFoundError):
        await get_outage_report(FakeSource(None), ["GPV5.1"])


@pytest.mark.asyncio
async def test_report_raises_empty_payload_without_data() -> None:
    with pytest.raises(EmptyPayloadError):
        await get_outage_report(FakeSource({"today": 1}), ["GPV5.1"])


@pytest.mark.asyncio
async def test_report_propagates_fetch_errors() -> None:
    source = FakeSource(error=FetchError("HTTP error: 500", status_code=500))

    with pytest.raises(FetchError):
        await get_outage_report(source, ["GPV5.1"])
