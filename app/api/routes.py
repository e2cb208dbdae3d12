from __future__ import annotations

from time import perf_counter

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response

from app.errors import (
    EmptyPayloadError,
    FetchError,
    NotFoundError,
    ParseError,
    UpstreamStatusError,
)
from app.services.report import get_outage_lines

router = APIRouter()

_ERROR_STATUS = {
    FetchError: "fetch_error",
    ParseError: "parse_error",
    UpstreamStatusError: "upstream_status",
}


@router.get("/healthz")
async def healthz(request: Request) -> dict:
    runner = request.app.state.runner
    handlers = request.app.state.handlers
    return {
        "status": "ok",
        "bot": {
            "enabled": request.app.state.settings.enable_bot,
            "running": runner.is_running(),
            "startedAt": runner.started_at.isoformat() if runner.started_at else None,
            "lastReportStatus": handlers.last_report_status,
            "lastReportAt": handlers.last_report_at.isoformat() if handlers.last_report_at else None,
            "lastError": handlers.last_error,
        },
    }


@router.get("/v1/report")
async def outage_report(
    request: Request,
    feeders: list[str] | None = Query(default=None),
) -> dict:
    settings = request.app.state.settings
    metrics = request.app.state.metrics
    keep = tuple(feeders) if feeders else settings.keep_feeders

    status = "success"
    timer_start = perf_counter()
    try:
        lines = await get_outage_lines(request.app.state.source, keep, settings.timezone_name)
    except (NotFoundError, EmptyPayloadError) as exc:
        status = "empty"
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (FetchError, ParseError, UpstreamStatusError) as exc:
        status = _ERROR_STATUS[type(exc)]
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except Exception:
        status = "error"
        raise
    finally:
        metrics.mark_report_status(status)
        metrics.observe_report_duration(perf_counter() - timer_start)

    return {
        "feeders": list(keep),
        "count": len(lines),
        "lines": lines,
        "text": "\n".join(lines),
    }


@router.get("/metrics")
async def metrics(request: Request) -> Response:
    payload, content_type = request.app.state.metrics.render()
    return Response(content=payload, media_type=content_type)
