"""Configuration for PhotoBot."""

import os
from typing import Optional

from dotenv import load_dotenv

# Загружаем переменные из .env, если файл есть рядом с проектом
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc


# Telegram bot token (required)
TELEGRAM_BOT_TOKEN: Optional[str] = os.environ.get("TELEGRAM_BOT_TOKEN")

# Flickr API key (required)
FLICKR_API_KEY: Optional[str] = os.environ.get("FLICKR_API_KEY")

# Сколько картинок отправлять на один запрос
RESULT_COUNT: int = _env_int("PHOTOBOT_RESULT_COUNT", 5)

# Размер страницы Flickr, из которой случайно выбираются картинки
CANDIDATES_PER_PAGE: int = _env_int("PHOTOBOT_CANDIDATES_PER_PAGE", 20)

# Одновременно обрабатываемые сообщения
MAX_CONCURRENCY: int = _env_int("PHOTOBOT_MAX_CONCURRENCY", 32)

SEND_TIMEOUT: float = _env_float("PHOTOBOT_SEND_TIMEOUT", 30.0)
SEARCH_TIMEOUT: float = _env_float("PHOTOBOT_SEARCH_TIMEOUT", 20.0)

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
