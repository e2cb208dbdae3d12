from __future__ import annotations

import os
from dataclasses import dataclass

from app.core.constants import DEFAULT_KEEP_FEEDERS, MAX_MESSAGE_LENGTH
from app.errors import ConfigError


@dataclass(frozen=True)
class Settings:
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    bot_token: str = ""
    enable_bot: bool = True
    max_message_length: int = MAX_MESSAGE_LENGTH
    keep_feeders: tuple[str, ...] = DEFAULT_KEEP_FEEDERS
    timezone_name: str = "Europe/Kyiv"

    provider_kind: str = "voe_html"
    provider_url: str = ""
    provider_timeout_seconds: float | None = None

    def validate(self) -> None:
        missing: list[str] = []
        if self.enable_bot and not self.bot_token:
            missing.append("BOT_TOKEN")
        if not self.provider_url:
            missing.append("API_URL")
        if missing:
            raise ConfigError(f"Required settings are not set: {', '.join(missing)}")

        if self.max_message_length <= 0:
            raise ConfigError("MAX_MESSAGE_LENGTH must be positive")


def _as_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    return int(raw)


def _as_optional_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    return float(raw)


def _as_list(raw: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def load_settings() -> Settings:
    return Settings(
        app_host=os.getenv("APP_HOST", "0.0.0.0"),
        app_port=_as_int(os.getenv("APP_PORT"), 8000),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        bot_token=os.getenv("BOT_TOKEN", ""),
        enable_bot=_as_bool(os.getenv("ENABLE_BOT"), True),
        max_message_length=_as_int(os.getenv("MAX_MESSAGE_LENGTH"), MAX_MESSAGE_LENGTH),
        keep_feeders=_as_list(os.getenv("KEEP_FEEDERS"), DEFAULT_KEEP_FEEDERS),
        timezone_name=os.getenv("TIMEZONE", "Europe/Kyiv"),
        provider_kind=os.getenv("PROVIDER_KIND", "voe_html"),
        provider_url=os.getenv("API_URL", ""),
        provider_timeout_seconds=_as_optional_float(os.getenv("PROVIDER_TIMEOUT_SECONDS")),
    )
