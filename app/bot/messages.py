from __future__ import annotations

from typing import Final

GREETING: Final[str] = "Привет, {name}! Запрашиваю данные..."
DEFAULT_USER_NAME: Final[str] = "пользователь"
EMPTY_RESPONSE: Final[str] = "Пустой ответ от API."
UPSTREAM_STATUS: Final[str] = "API вернул статус: {status}"
APOLOGY: Final[str] = "Упс — не удалось получить данные. Попробуйте позже."
NO_OUTAGES: Final[str] = "Отключений по выбранным графикам не запланировано."
HELP: Final[str] = "Отправь /start чтобы получить данные."
HINT: Final[str] = "Используйте /start или /help."


def split_message(text: str, limit: int) -> list[str]:
    """Cut ``text`` into consecutive chunks of at most ``limit`` characters."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    return [text[offset : offset + limit] for offset in range(0, len(text), limit)]
