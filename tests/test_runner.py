from __future__ import annotations

import pytest
from telegram.ext import CommandHandler, MessageHandler

from app.bot.handlers import OutageBotHandlers
from app.bot.runner import BotRunner
from app.config import Settings
from app.observability.metrics import Metrics
from tests.helpers import FakeSource


def _runner() -> BotRunner:
    settings = Settings(bot_token="123456:TEST-token", provider_url="https://example.test")
    handlers = OutageBotHandlers(settings=settings, source=FakeSource(), metrics=Metrics())
    return BotRunner(settings=settings, handlers=handlers)


def test_build_application_registers_commands_and_fallback() -> None:
    runner = _runner()

    application = runner.build_application()

    registered = application.handlers[0]
    commands = [h.commands for h in registered if isinstance(h, CommandHandler)]
    assert commands == [frozenset({"start"}), frozenset({"help"})]
    assert isinstance(registered[-1], MessageHandler)
    assert runner.handlers.on_error in application.error_handlers


@pytest.mark.asyncio
async def test_stop_without_start_is_noop() -> None:
    runner = _runner()

    await runner.stop()

    assert runner.is_running() is False
