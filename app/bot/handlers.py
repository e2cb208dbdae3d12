from __future__ import annotations

import logging
from datetime import datetime, timezone
from time import perf_counter

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from app.bot import messages
from app.config import Settings
from app.errors import (
    EmptyPayloadError,
    FetchError,
    NotFoundError,
    ParseError,
    UpstreamStatusError,
)
from app.observability.metrics import Metrics
from app.providers.base import ScheduleSource
from app.services.report import get_outage_report


class OutageBotHandlers:
    def __init__(self, *, settings: Settings, source: ScheduleSource, metrics: Metrics) -> None:
        self.settings = settings
        self.source = source
        self.metrics = metrics
        self._logger = logging.getLogger("voe.bot")

        self.last_report_status: str = "never"
        self.last_report_at: datetime | None = None
        self.last_error: str | None = None

    def register(self, application: Application) -> None:
        application.add_handler(CommandHandler("start", self.start))
        application.add_handler(CommandHandler("help", self.help))
        application.add_handler(MessageHandler(filters.UpdateType.MESSAGE, self.fallback))
        application.add_error_handler(self.on_error)

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        if message is None:
            return

        user = update.effective_user
        requester = (user.username or user.id) if user else "unknown"
        self._logger.info("/start from %s", requester)

        name = (user.first_name if user else None) or messages.DEFAULT_USER_NAME
        await message.reply_text(messages.GREETING.format(name=name))

        status = "success"
        error: str | None = None
        timer_start = perf_counter()
        try:
            text = await get_outage_report(
                self.source, self.settings.keep_feeders, self.settings.timezone_name
            )
            chunks = messages.split_message(text, self.settings.max_message_length)
            if not chunks:
                chunks = [messages.NO_OUTAGES]
            for chunk in chunks:
                await message.reply_text(chunk)
            self.metrics.mark_messages_sent(len(chunks))

        except (NotFoundError, EmptyPayloadError) as exc:
            status = "empty"
            error = str(exc)
            self._logger.info("Empty schedule response: %s", exc)
            await message.reply_text(messages.EMPTY_RESPONSE)
        except UpstreamStatusError as exc:
            status = "upstream_status"
            error = str(exc)
            self._logger.warning("Schedule source returned status %s", exc.status)
            await message.reply_text(messages.UPSTREAM_STATUS.format(status=exc.status))
        except FetchError as exc:
            status = "fetch_error"
            error = str(exc)
            self._logger.exception("Fetch error in /start handler (status=%s)", exc.status_code)
            await message.reply_text(messages.APOLOGY)
        except ParseError as exc:
            status = "parse_error"
            error = str(exc)
            self._logger.exception("Parse error in /start handler")
            await message.reply_text(messages.APOLOGY)
        except Exception as exc:  # pragma: no cover
            status = "error"
            error = str(exc)
            self._logger.exception("Unhandled error in /start handler")
            await message.reply_text(messages.APOLOGY)
        finally:
            self.last_report_status = status
            self.last_report_at = datetime.now(tz=timezone.utc)
            self.last_error = error
            self.metrics.mark_report_status(status)
            self.metrics.observe_report_duration(perf_counter() - timer_start)

    async def help(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.effective_message is not None:
            await update.effective_message.reply_text(messages.HELP)

    async def fallback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.effective_message is not None:
            await update.effective_message.reply_text(messages.HINT)

    async def on_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        self._logger.error("Error while handling update %r", update, exc_info=context.error)
