from __future__ import annotations

import logging

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.bot.handlers import OutageBotHandlers
from app.bot.runner import BotRunner
from app.config import Settings, load_settings
from app.observability.metrics import Metrics
from app.providers.registry import build_provider


class NullRunner:
    started_at = None

    def is_running(self) -> bool:
        return False


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    source = build_provider(app_settings)
    metrics = Metrics()
    handlers = OutageBotHandlers(settings=app_settings, source=source, metrics=metrics)

    runner = BotRunner(settings=app_settings, handlers=handlers) if app_settings.enable_bot else None

    app = FastAPI(title="voe-outage-bot", version="0.1.0")
    app.state.settings = app_settings
    app.state.source = source
    app.state.metrics = metrics
    app.state.handlers = handlers
    app.state.runner = runner if runner is not None else NullRunner()

    @app.on_event("startup")
    async def _on_startup() -> None:
        if runner is not None:
            await runner.start()

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        if runner is not None:
            await runner.stop()

    app.include_router(api_router)
    return app
