from __future__ import annotations

import logging
from datetime import datetime, timezone

from telegram import Update
from telegram.ext import Application

from app.bot.handlers import OutageBotHandlers
from app.config import Settings


class BotRunner:
    """Owns the Telegram application and its long-polling receive loop."""

    def __init__(self, *, settings: Settings, handlers: OutageBotHandlers) -> None:
        self.settings = settings
        self.handlers = handlers

        self._application: Application | None = None
        self._logger = logging.getLogger("voe.bot")

        self.started_at: datetime | None = None

    def build_application(self) -> Application:
        application = (
            Application.builder()
            .token(self.settings.bot_token)
            .concurrent_updates(True)
            .build()
        )
        self.handlers.register(application)
        return application

    async def start(self) -> None:
        if self._application is not None:
            return

        application = self.build_application()
        await application.initialize()
        await application.updater.start_polling(allowed_updates=Update.ALL_TYPES)
        await application.start()

        self._application = application
        self.started_at = datetime.now(tz=timezone.utc)
        self._logger.info("Bot started (polling)")

    async def stop(self) -> None:
        if self._application is None:
            return

        application = self._application
        self._application = None
        if application.updater is not None and application.updater.running:
            await application.updater.stop()
        if application.running:
            await application.stop()
        await application.shutdown()
        self._logger.info("Bot stopped")

    def is_running(self) -> bool:
        return self._application is not None and self._application.running
